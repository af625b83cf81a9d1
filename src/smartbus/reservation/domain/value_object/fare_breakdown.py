from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from smartbus.shared.domain import Money


@dataclass(frozen=True)
class FareBreakdown:
    """支払金額の内訳

    subtotal = 見積運賃 x 座席数
    tax      = subtotal x 税率（整数単位に四捨五入）
    total    = subtotal + tax + 手数料
    """

    unit_price: Money
    seat_count: int
    subtotal: Money
    tax: Money
    fee: Money
    total: Money

    @classmethod
    def compute(
        cls,
        unit_price: Money,
        seat_count: int,
        tax_rate: Decimal,
        fee: Money,
    ) -> FareBreakdown:
        if seat_count < 1:
            raise ValueError("Seat count must be at least 1")

        subtotal = unit_price.multiply(seat_count)
        tax = subtotal.multiply(tax_rate).rounded()
        return cls(
            unit_price=unit_price,
            seat_count=seat_count,
            subtotal=subtotal,
            tax=tax,
            fee=fee,
            total=subtotal.add(tax).add(fee),
        )
