from __future__ import annotations

from pydantic import BaseModel

from smartbus.seating.domain.entity import SeatMap


class SeatData(BaseModel):
    """座席データのレスポンスモデル"""

    number: str
    row_index: int
    column_index: int
    occupied: bool
    is_window: bool
    price_amount: str
    price_currency: str


class SeatMapData(BaseModel):
    """座席表データのレスポンスモデル"""

    trip_id: str
    available_count: int
    rows: list[list[SeatData]]


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: SeatMapData


def to_response(seat_map: SeatMap) -> dict:
    """SeatMap エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(
        data=SeatMapData(
            trip_id=str(seat_map.trip_id),
            available_count=seat_map.available_count,
            rows=[
                [
                    SeatData(
                        number=str(seat.number),
                        row_index=seat.row_index,
                        column_index=seat.column_index,
                        occupied=seat.occupied,
                        is_window=seat.is_window,
                        price_amount=str(seat.price_tier.amount),
                        price_currency=str(seat.price_tier.currency),
                    )
                    for seat in row
                ]
                for row in seat_map.rows()
            ],
        )
    ).model_dump()
