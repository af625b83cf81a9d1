from __future__ import annotations

import re
import uuid
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class BookingId:
    """予約ID

    "LG" + 大文字16進数 12 桁の形式。
    例: LG3F9A1C0B7E2D
    """

    value: str

    PREFIX: ClassVar[str] = "LG"
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^LG[0-9A-F]{12}$")

    def __post_init__(self) -> None:
        if not self.PATTERN.match(self.value):
            raise ValueError(
                f"Invalid booking id format: {self.value}. "
                "Expected format: LG + 12 upper-case hex digits"
            )

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> BookingId:
        """新しい予約IDを生成"""
        return cls(value=f"{cls.PREFIX}{uuid.uuid4().hex[:12].upper()}")
