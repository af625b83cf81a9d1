from decimal import Decimal
from typing import NotRequired, TypedDict

from smartbus.catalog.domain.entity import Trip
from smartbus.catalog.domain.value_object import ServiceClass
from smartbus.shared.domain import ClockTime, Currency, Money, TripId


class TripDetails(TypedDict):
    """便情報の入力データ構造"""

    trip_id: str
    operator_name: str
    departure_time: str
    arrival_time: str
    service_class: str
    base_fare_amount: Decimal
    base_fare_currency: str
    seats_available: int
    rating: float
    amenities: NotRequired[list[str]]


class TripFactory:
    """便エンティティのファクトリ

    - プリミティブ型から Value Object への変換
    - 所要時間は出発・到着時刻から算出する
    """

    def create(self, details: TripDetails) -> Trip:
        departure_time = ClockTime(details["departure_time"])
        arrival_time = ClockTime(details["arrival_time"])

        return Trip(
            id=TripId(value=details["trip_id"]),
            operator_name=details["operator_name"],
            departure_time=departure_time,
            arrival_time=arrival_time,
            duration_minutes=departure_time.minutes_until(arrival_time),
            service_class=ServiceClass(details["service_class"]),
            base_fare=Money(
                amount=details["base_fare_amount"],
                currency=Currency(details["base_fare_currency"]),
            ),
            seats_available=details["seats_available"],
            rating=details["rating"],
            amenities=frozenset(details.get("amenities", [])),
        )
