from __future__ import annotations

from pydantic import BaseModel

from smartbus.reservation.domain import Confirmation


class PassengerData(BaseModel):
    """乗客データのレスポンスモデル"""

    seat: str
    name: str
    age: int
    gender: str


class ConfirmationData(BaseModel):
    """予約確定データのレスポンスモデル"""

    booking_id: str
    trip_id: str
    operator_name: str
    origin: str
    destination: str
    travel_date: str
    departure_time: str
    seats: list[str]
    passengers: list[PassengerData]
    email: str
    phone: str
    unit_price: str
    seat_count: int
    subtotal: str
    tax: str
    fee: str
    total_amount: str
    currency: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: ConfirmationData


def to_response(confirmation: Confirmation) -> dict:
    """Confirmation エンティティをレスポンス辞書に変換する"""
    draft = confirmation.draft
    breakdown = confirmation.breakdown
    return SuccessResponse(
        data=ConfirmationData(
            booking_id=str(confirmation.booking_id),
            trip_id=str(draft.trip.id),
            operator_name=draft.trip.operator_name,
            origin=str(draft.criteria.origin),
            destination=str(draft.criteria.destination),
            travel_date=draft.criteria.travel_date.isoformat(),
            departure_time=str(draft.trip.departure_time),
            seats=draft.selection.labels(),
            passengers=[
                PassengerData(
                    seat=str(seat),
                    name=passenger.name,
                    age=passenger.age,
                    gender=passenger.gender.value,
                )
                for seat, passenger in zip(draft.selection, draft.passengers)
            ],
            email=draft.contact.email,
            phone=draft.contact.phone,
            unit_price=str(breakdown.unit_price.amount),
            seat_count=breakdown.seat_count,
            subtotal=str(breakdown.subtotal.amount),
            tax=str(breakdown.tax.amount),
            fee=str(breakdown.fee.amount),
            total_amount=str(breakdown.total.amount),
            currency=str(breakdown.total.currency),
        )
    ).model_dump()
