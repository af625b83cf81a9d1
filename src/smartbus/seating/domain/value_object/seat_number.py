from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class SeatNumber:
    """座席番号

    列を表す英字（A-J）+ 位置を表す数字（1-4）の形式。
    例: A1, C2, J4
    """

    value: str

    ROWS: ClassVar[int] = 10
    SEATS_PER_ROW: ClassVar[int] = 4
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[A-J][1-4]$")

    def __post_init__(self) -> None:
        normalized = self.value.strip().upper()
        if not self.PATTERN.match(normalized):
            raise ValueError(
                f"Invalid seat number format: {self.value}. "
                "Expected format: A1 (row letter A-J + column 1-4)"
            )
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    @property
    def row_index(self) -> int:
        return ord(self.value[0]) - ord("A")

    @property
    def column_index(self) -> int:
        return int(self.value[1]) - 1

    @property
    def position(self) -> int:
        """通し番号（1 始まり）"""
        return self.row_index * self.SEATS_PER_ROW + self.column_index + 1

    @classmethod
    def from_position(cls, position: int) -> SeatNumber:
        """通し番号（1 始まり）から座席番号を生成する"""
        total = cls.ROWS * cls.SEATS_PER_ROW
        if not 1 <= position <= total:
            raise ValueError(f"Seat position must be between 1 and {total}")
        row, column = divmod(position - 1, cls.SEATS_PER_ROW)
        return cls(f"{chr(ord('A') + row)}{column + 1}")
