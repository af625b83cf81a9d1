from dataclasses import dataclass
from decimal import Decimal

from smartbus.pricing.domain.enum import FactorDirection


@dataclass(frozen=True)
class PriceFactor:
    """料金調整要因

    ルールが発火したときに生成される乗数とラベルの組。
    例: PriceFactor("Morning Rush", Decimal("1.25")) -> +25%
    """

    label: str
    multiplier: Decimal

    def __post_init__(self) -> None:
        if not self.label:
            raise ValueError("Price factor label cannot be empty")
        if not isinstance(self.multiplier, Decimal):
            object.__setattr__(self, "multiplier", Decimal(str(self.multiplier)))
        if self.multiplier <= 0:
            raise ValueError("Price factor multiplier must be greater than zero")

    @property
    def direction(self) -> FactorDirection:
        if self.multiplier >= 1:
            return FactorDirection.INCREASE
        return FactorDirection.DECREASE

    @property
    def percent_change(self) -> Decimal:
        """増減率（%）。1.25 -> 25, 0.85 -> -15"""
        return ((self.multiplier - 1) * 100).normalize()

    @property
    def impact(self) -> Decimal:
        """増減率の絶対値"""
        return abs(self.percent_change)

    def change_label(self) -> str:
        """表示用の増減率（例: +25%, -15%）"""
        sign = "+" if self.percent_change > 0 else ""
        return f"{sign}{self.percent_change:f}%"
