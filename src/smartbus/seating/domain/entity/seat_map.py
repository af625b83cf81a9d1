from collections.abc import Iterable
from decimal import Decimal

from smartbus.seating.domain.value_object import Seat, SeatNumber, SeatSelection
from smartbus.shared.domain import Entity, Money, TripId
from smartbus.shared.domain.exception import BusinessRuleViolationException


class SeatMap(Entity[TripId]):
    """便ごとの座席表

    10 列 x 4 席（2+2 配列）の 40 席。
    一度生成した座席表の空席状況はセッション中に変化しない。
    """

    TOTAL_SEATS = SeatNumber.ROWS * SeatNumber.SEATS_PER_ROW

    def __init__(self, trip_id: TripId, seats: Iterable[Seat]) -> None:
        super().__init__(trip_id)
        self._seats = tuple(sorted(seats, key=lambda seat: seat.number.position))
        self._by_number = {seat.number: seat for seat in self._seats}

        if len(self._by_number) != self.TOTAL_SEATS:
            raise BusinessRuleViolationException(
                f"Seat map must contain exactly {self.TOTAL_SEATS} distinct seats"
            )

    @property
    def trip_id(self) -> TripId:
        return self.id

    @property
    def seats(self) -> tuple[Seat, ...]:
        return self._seats

    def seat(self, number: SeatNumber) -> Seat | None:
        return self._by_number.get(number)

    def rows(self) -> list[tuple[Seat, ...]]:
        """列ごとに座席をまとめて返す"""
        width = SeatNumber.SEATS_PER_ROW
        return [
            self._seats[start : start + width]
            for start in range(0, len(self._seats), width)
        ]

    def is_selectable(self, number: SeatNumber) -> bool:
        seat = self._by_number.get(number)
        return seat is not None and not seat.occupied

    @property
    def occupied_count(self) -> int:
        return sum(1 for seat in self._seats if seat.occupied)

    @property
    def available_count(self) -> int:
        return self.TOTAL_SEATS - self.occupied_count

    def selection_total(self, selection: SeatSelection) -> Money:
        """選択中の座席の価格帯合計（表示用）"""
        total = Money(amount=Decimal("0"), currency=self._seats[0].price_tier.currency)
        for number in selection:
            total = total.add(self._by_number[number].price_tier)
        return total
