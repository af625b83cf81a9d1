from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .seat_number import SeatNumber


@dataclass(frozen=True)
class SeatSelection:
    """選択中の座席

    選択した順序を保持する。乗客情報はこの順序で座席に対応付けられる。
    """

    seats: tuple[SeatNumber, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "seats", tuple(self.seats))
        if len(set(self.seats)) != len(self.seats):
            raise ValueError("Seat selection cannot contain duplicates")

    def __contains__(self, seat: object) -> bool:
        return seat in self.seats

    def __len__(self) -> int:
        return len(self.seats)

    def __iter__(self) -> Iterator[SeatNumber]:
        return iter(self.seats)

    def added(self, seat: SeatNumber) -> SeatSelection:
        return SeatSelection(seats=(*self.seats, seat))

    def removed(self, seat: SeatNumber) -> SeatSelection:
        return SeatSelection(seats=tuple(s for s in self.seats if s != seat))

    def is_complete(self, limit: int) -> bool:
        """選択数が上限ちょうどかどうか"""
        return len(self.seats) == limit

    def labels(self) -> list[str]:
        return [str(seat) for seat in self.seats]
