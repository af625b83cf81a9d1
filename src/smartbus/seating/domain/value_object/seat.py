from dataclasses import dataclass

from smartbus.shared.domain import Money

from .seat_number import SeatNumber


@dataclass(frozen=True)
class Seat:
    """座席

    2+2 配列で、列内の位置 0・3 が窓側、1・2 が通路側。
    """

    number: SeatNumber
    occupied: bool
    price_tier: Money

    @property
    def row_index(self) -> int:
        return self.number.row_index

    @property
    def column_index(self) -> int:
        return self.number.column_index

    @property
    def is_window(self) -> bool:
        return self.column_index in (0, 3)

    @property
    def is_aisle(self) -> bool:
        return self.column_index in (1, 2)
