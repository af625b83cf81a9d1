from datetime import date

from pydantic import BaseModel, Field

from smartbus.reservation.domain import Gender
from smartbus.shared.domain import SearchCriteria


class PassengerRequest(BaseModel):
    """乗客情報の入力スキーマ

    未入力の項目は予約確定時の検証でまとめてエラーにする。
    """

    name: str = Field(default="", description="氏名", examples=["Ada Obi"])
    age: int | None = Field(default=None, description="年齢", examples=[34])
    gender: Gender | None = Field(
        default=None,
        description="性別",
        examples=["female"],
    )


class ContactRequest(BaseModel):
    """連絡先の入力スキーマ"""

    email: str = Field(
        default="",
        description="メールアドレス",
        examples=["ada@example.com"],
    )

    phone: str = Field(
        default="",
        description="電話番号",
        examples=["+2348012345678"],
    )


class FinalizeBookingRequest(BaseModel):
    """予約確定リクエストスキーマ"""

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
        examples=["yaba"],
    )

    travel_date: date = Field(..., description="乗車日", examples=["2026-11-02"])

    trip_id: str = Field(..., min_length=1, description="便ID", examples=["1"])

    seats: list[str] = Field(
        ...,
        min_length=1,
        max_length=SearchCriteria.MAX_PASSENGERS,
        description="座席番号（選択順）",
        examples=[["A1", "A2"]],
    )

    passengers: list[PassengerRequest] = Field(default_factory=list)

    contact: ContactRequest = Field(default_factory=ContactRequest)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "origin": "ikeja",
                    "destination": "yaba",
                    "travel_date": "2026-11-02",
                    "trip_id": "1",
                    "seats": ["A1", "A2"],
                    "passengers": [
                        {"name": "Ada Obi", "age": 34, "gender": "female"},
                        {"name": "Tunde Obi", "age": 36, "gender": "male"},
                    ],
                    "contact": {
                        "email": "ada@example.com",
                        "phone": "+2348012345678",
                    },
                }
            ]
        }
    }
