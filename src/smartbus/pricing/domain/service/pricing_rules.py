"""動的料金のルール群

各ルールは独立した乗数を 1 つだけ返すか、発火しなければ None を返す。
乗数は交換可能だが、要因の表示順は DEFAULT_RULES の順序に従う。
"""

import math
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from typing import Callable

from smartbus.catalog.domain.entity import Trip
from smartbus.pricing.domain.value_object import PriceFactor
from smartbus.shared.domain import LocationId, SearchCriteria

SECONDS_PER_DAY = 24 * 60 * 60


@dataclass(frozen=True)
class PricingContext:
    """ルール評価時の外部状態"""

    now: datetime
    premium_zones: frozenset[LocationId] = frozenset()


PricingRule = Callable[[Trip, SearchCriteria, PricingContext], PriceFactor | None]


def days_until_travel(now: datetime, travel_date: date) -> int:
    """出発日までの日数（出発日 0 時との差を日単位で切り上げ）"""
    departure_day = datetime.combine(travel_date, time.min, tzinfo=now.tzinfo)
    return math.ceil((departure_day - now).total_seconds() / SECONDS_PER_DAY)


def time_of_day(
    trip: Trip, criteria: SearchCriteria, context: PricingContext
) -> PriceFactor | None:
    hour = trip.departure_time.hour
    if 6 <= hour <= 10:
        return PriceFactor("Morning Rush", Decimal("1.25"))
    if 16 <= hour <= 20:
        return PriceFactor("Evening Rush", Decimal("1.20"))
    if hour >= 22 or hour <= 5:
        return PriceFactor("Night Service", Decimal("1.05"))
    return None


def scarcity(
    trip: Trip, criteria: SearchCriteria, context: PricingContext
) -> PriceFactor | None:
    seats = trip.seats_available
    if seats <= 5:
        return PriceFactor("Very High Demand", Decimal("1.30"))
    if seats <= 10:
        return PriceFactor("High Demand", Decimal("1.15"))
    if seats >= 20:
        return PriceFactor("Good Availability", Decimal("0.90"))
    return None


def service_class(
    trip: Trip, criteria: SearchCriteria, context: PricingContext
) -> PriceFactor | None:
    if trip.service_class.is_executive:
        return PriceFactor("Executive Class", Decimal("1.15"))
    if trip.service_class.is_premium:
        return PriceFactor("Premium Class", Decimal("1.08"))
    return None


def day_of_week(
    trip: Trip, criteria: SearchCriteria, context: PricingContext
) -> PriceFactor | None:
    if criteria.travel_date is None:
        return None
    # Monday=0 ... Sunday=6
    weekday = criteria.travel_date.weekday()
    if weekday in (4, 5):
        return PriceFactor("Weekend Travel", Decimal("1.10"))
    if weekday == 6:
        return PriceFactor("Sunday Premium", Decimal("1.08"))
    return None


def lead_time(
    trip: Trip, criteria: SearchCriteria, context: PricingContext
) -> PriceFactor | None:
    if criteria.travel_date is None:
        return None
    days = days_until_travel(context.now, criteria.travel_date)
    if days >= 3:
        return PriceFactor("Early Booking", Decimal("0.85"))
    if days <= 0:
        return PriceFactor("Same Day Booking", Decimal("1.20"))
    return None


def operator_rating(
    trip: Trip, criteria: SearchCriteria, context: PricingContext
) -> PriceFactor | None:
    if trip.rating >= 4.5:
        return PriceFactor("Premium Operator", Decimal("1.05"))
    return None


def premium_route(
    trip: Trip, criteria: SearchCriteria, context: PricingContext
) -> PriceFactor | None:
    if (
        criteria.origin in context.premium_zones
        or criteria.destination in context.premium_zones
    ):
        return PriceFactor("Premium Route", Decimal("1.12"))
    return None


DEFAULT_RULES: tuple[PricingRule, ...] = (
    time_of_day,
    scarcity,
    service_class,
    day_of_week,
    lead_time,
    operator_rating,
    premium_route,
)
