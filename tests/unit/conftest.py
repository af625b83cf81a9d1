from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from smartbus.catalog.domain.entity import Trip
from smartbus.catalog.domain.factory import TripFactory
from smartbus.shared.domain import Clock, LocationId, SearchCriteria

# 2026-11-02 は月曜日
MONDAY = date(2026, 11, 2)


class FixedClock(Clock):
    """固定時刻を返す Clock"""

    def __init__(self, now: datetime) -> None:
        self._now = now

    def now(self) -> datetime:
        return self._now


@dataclass
class LambdaContext:
    """Powertools の inject_lambda_context が参照する属性だけを持つスタブ"""

    function_name: str = "test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:eu-west-1:123456789012:function:test"
    aws_request_id: str = "da658bd3-2d6f-4e7b-8ec2-937234644fdc"


@pytest.fixture
def monday() -> date:
    """乗車日に使う月曜日"""
    return MONDAY


@pytest.fixture
def fixed_clock():
    """FixedClock を生成する Factory fixture"""

    def _factory(now: datetime = datetime(2026, 10, 23, 9, 0)) -> FixedClock:
        return FixedClock(now)

    return _factory


@pytest.fixture
def create_trip():
    """Trip を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        trip_id: str = "1",
        operator_name: str = "BRT Lagos",
        departure_time: str = "06:00",
        arrival_time: str = "07:30",
        service_class: str = "AC Standard",
        base_fare_amount: Decimal = Decimal("800"),
        seats_available: int = 15,
        rating: float = 4.5,
    ) -> Trip:
        return TripFactory().create(
            {
                "trip_id": trip_id,
                "operator_name": operator_name,
                "departure_time": departure_time,
                "arrival_time": arrival_time,
                "service_class": service_class,
                "base_fare_amount": base_fare_amount,
                "base_fare_currency": "NGN",
                "seats_available": seats_available,
                "rating": rating,
            }
        )

    return _factory


@pytest.fixture
def create_criteria():
    """SearchCriteria を生成する Factory fixture"""

    def _factory(
        origin: str = "ikeja",
        destination: str = "yaba",
        travel_date: date = MONDAY,
        passenger_count: int = 1,
    ) -> SearchCriteria:
        return SearchCriteria(
            origin=LocationId(origin),
            destination=LocationId(destination),
            travel_date=travel_date,
            passenger_count=passenger_count,
        )

    return _factory


@pytest.fixture
def occupancy_provider():
    """予約済み座席を返す SeatInventoryProvider のモック（初期値は全席空席）"""
    provider = MagicMock()
    provider.occupied_seats.return_value = frozenset()
    return provider


@pytest.fixture
def lambda_context() -> LambdaContext:
    return LambdaContext()
