from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from smartbus.shared.domain import Money, TripId

from .price_factor import PriceFactor


@dataclass(frozen=True)
class QuotedFare:
    """見積運賃

    検索条件または便が変わるたびに再計算され、永続化はされない。
    factors はルールの評価順（時間帯 → 空席 → 車両クラス → 曜日 → 予約時期 →
    評価 → 路線）を保持する。
    """

    trip_id: TripId
    base_price: Money
    final_price: Money
    factors: tuple[PriceFactor, ...] = ()

    def __post_init__(self) -> None:
        if self.base_price.currency != self.final_price.currency:
            raise ValueError("Base and final price must share a currency")
        object.__setattr__(self, "factors", tuple(self.factors))

    @property
    def price_difference(self) -> Decimal:
        """基本運賃との差額（値下げの場合は負）"""
        return self.final_price.amount - self.base_price.amount

    @property
    def percentage_change(self) -> Decimal:
        """基本運賃に対する増減率（%、小数第1位）"""
        ratio = self.price_difference / self.base_price.amount * 100
        return ratio.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)

    def top_factors(self, n: int) -> list[PriceFactor]:
        """影響の大きい順に上位 n 件を返す

        影響が同じ場合は評価順を保つ。
        """
        if n <= 0:
            return []
        ranked = sorted(self.factors, key=lambda factor: factor.impact, reverse=True)
        return ranked[:n]
