from collections.abc import Iterable
from decimal import Decimal

from smartbus.catalog.domain.entity import Trip
from smartbus.pricing.domain.value_object import QuotedFare
from smartbus.shared.domain import Clock, LocationId, Money, SearchCriteria
from smartbus.shared.domain.exception import BusinessRuleViolationException

from .pricing_rules import DEFAULT_RULES, PricingContext, PricingRule


class PricingEngine:
    """動的料金エンジン

    基本運賃に発火したルールの乗数をすべて掛け、整数単位に四捨五入する。
    副作用はなく、現在時刻（Clock）が同じなら結果も同じになる。
    """

    def __init__(
        self,
        clock: Clock,
        premium_zones: Iterable[LocationId] = (),
        rules: tuple[PricingRule, ...] = DEFAULT_RULES,
    ) -> None:
        self._clock = clock
        self._premium_zones = frozenset(premium_zones)
        self._rules = rules

    def quote(self, trip: Trip, criteria: SearchCriteria) -> QuotedFare:
        """便と検索条件から見積運賃を算出する"""
        if criteria.travel_date is None:
            raise BusinessRuleViolationException(
                "Travel date is required to quote a fare"
            )

        context = PricingContext(
            now=self._clock.now(),
            premium_zones=self._premium_zones,
        )

        factors = []
        for rule in self._rules:
            factor = rule(trip, criteria, context)
            if factor is not None:
                factors.append(factor)

        price = trip.base_fare
        for factor in factors:
            price = price.multiply(factor.multiplier)

        final_price = price.rounded()
        # 端数処理で 0 にならないよう最小単位を下限とする
        if not final_price.is_positive():
            final_price = Money(amount=Decimal("1"), currency=price.currency)

        return QuotedFare(
            trip_id=trip.id,
            base_price=trip.base_fare,
            final_price=final_price,
            factors=tuple(factors),
        )
