from datetime import date

from pydantic import BaseModel, Field

from smartbus.shared.domain import SearchCriteria


class QuoteTripsRequest(BaseModel):
    """便検索（見積付き）リクエストスキーマ"""

    origin: str = Field(
        ...,
        min_length=1,
        description="出発地の停留地ID",
        examples=["ikeja"],
    )

    destination: str = Field(
        ...,
        min_length=1,
        description="到着地の停留地ID",
        examples=["victoria-island"],
    )

    travel_date: date = Field(
        ...,
        description="乗車日（ISO 8601形式）",
        examples=["2026-11-02"],
    )

    passenger_count: int = Field(
        default=1,
        ge=1,
        le=SearchCriteria.MAX_PASSENGERS,
        description="乗客数",
        examples=[1, 2],
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "origin": "ikeja",
                    "destination": "victoria-island",
                    "travel_date": "2026-11-02",
                    "passenger_count": 2,
                }
            ]
        }
    }
