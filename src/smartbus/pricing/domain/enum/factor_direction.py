from enum import Enum


class FactorDirection(str, Enum):
    """料金調整の向き"""

    INCREASE = "increase"
    DECREASE = "decrease"
