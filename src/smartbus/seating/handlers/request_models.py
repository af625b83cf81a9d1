from pydantic import BaseModel, Field


class SeatMapRequest(BaseModel):
    """座席表取得リクエストモデル"""

    trip_id: str = Field(
        ...,
        min_length=1,
        description="便ID",
        examples=["1"],
    )
