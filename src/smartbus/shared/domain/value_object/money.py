from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from .currency import Currency


@dataclass(frozen=True)
class Money:
    """金額（通貨情報含む）

    金額は Decimal で保持し、浮動小数点の誤差を持ち込まない。
    """

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def add(self, other: Money) -> Money:
        """金額を加算する"""
        if self.currency != other.currency:
            raise ValueError("Cannot add money with different currencies")
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def multiply(self, factor: Decimal | int) -> Money:
        """係数を掛ける（丸めは行わない）"""
        return Money(amount=self.amount * Decimal(factor), currency=self.currency)

    def rounded(self) -> Money:
        """通貨の最小整数単位に四捨五入する（0.5 は切り上げ）"""
        return Money(
            amount=self.amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP),
            currency=self.currency,
        )

    def is_positive(self) -> bool:
        return self.amount > 0

    @classmethod
    def ngn(cls, amount: Decimal | int | str) -> Money:
        """ナイラで Money を生成"""
        return cls(amount=Decimal(str(amount)), currency=Currency.ngn())
