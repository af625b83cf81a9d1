import random

from smartbus.catalog.domain.entity import Trip
from smartbus.seating.domain.entity import SeatMap
from smartbus.seating.domain.repository import SeatInventoryProvider
from smartbus.seating.domain.value_object import SeatNumber


class RandomSeatInventoryProvider(SeatInventoryProvider):
    """擬似乱数で予約済み座席を決める SeatInventoryProvider の具象実装

    5〜14 回座席をランダムに引く（重複あり）ため、予約済み座席は 1〜14 席になる。
    """

    MIN_DRAWS = 5
    MAX_DRAWS = 14

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def occupied_seats(self, trip: Trip) -> frozenset[SeatNumber]:
        draws = self._rng.randint(self.MIN_DRAWS, self.MAX_DRAWS)
        return frozenset(
            SeatNumber.from_position(self._rng.randint(1, SeatMap.TOTAL_SEATS))
            for _ in range(draws)
        )
