from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class ClockTime:
    """時刻（HH:MM 形式、24 時間制）

    例: 06:00, 22:30
    """

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")

    def __post_init__(self) -> None:
        if not self.PATTERN.match(self.value):
            raise ValueError(
                f"Invalid clock time format: {self.value}. Expected format: HH:MM"
            )

    def __str__(self) -> str:
        return self.value

    @property
    def hour(self) -> int:
        return int(self.value[:2])

    @property
    def minute(self) -> int:
        return int(self.value[3:])

    def minutes_until(self, other: ClockTime) -> int:
        """other までの経過分数（日付をまたぐ場合は翌日として扱う）"""
        start = self.hour * 60 + self.minute
        end = other.hour * 60 + other.minute
        return (end - start) % (24 * 60)
