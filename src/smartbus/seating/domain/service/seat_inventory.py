from decimal import Decimal

from smartbus.catalog.domain.entity import Trip
from smartbus.seating.domain.entity import SeatMap
from smartbus.seating.domain.repository import SeatInventoryProvider
from smartbus.seating.domain.value_object import Seat, SeatNumber, SeatSelection
from smartbus.shared.domain import Money, TripId


class SeatInventory:
    """座席表の生成と座席選択のルール

    - 座席の価格帯は 2 列（8 席）ごとに increment ずつ上がる
    - 予約済み状況は SeatInventoryProvider から取得し、便ごとに 1 度だけ確定する
    """

    SEATS_PER_TIER = 8

    def __init__(
        self,
        provider: SeatInventoryProvider,
        tier_increment: Decimal = Decimal("50"),
    ) -> None:
        self._provider = provider
        self._tier_increment = tier_increment
        self._maps: dict[TripId, SeatMap] = {}

    def layout(self, trip: Trip) -> SeatMap:
        """便の座席表を返す（同じ便には同じ座席表を返す）"""
        seat_map = self._maps.get(trip.id)
        if seat_map is None:
            seat_map = self._build(trip)
            self._maps[trip.id] = seat_map
        return seat_map

    def _build(self, trip: Trip) -> SeatMap:
        occupied = self._provider.occupied_seats(trip)
        seats = []
        for position in range(1, SeatMap.TOTAL_SEATS + 1):
            number = SeatNumber.from_position(position)
            tier = (position - 1) // self.SEATS_PER_TIER
            seats.append(
                Seat(
                    number=number,
                    occupied=number in occupied,
                    price_tier=trip.base_fare.add(
                        Money(
                            amount=self._tier_increment * tier,
                            currency=trip.base_fare.currency,
                        )
                    ),
                )
            )
        return SeatMap(trip_id=trip.id, seats=seats)

    @staticmethod
    def select(
        seat_map: SeatMap,
        current: SeatSelection,
        seat: SeatNumber,
        limit: int,
    ) -> SeatSelection:
        """座席をクリックしたときの選択状態を返す

        - 予約済み座席・座席表にない座席は何もしない
        - 選択済み座席は選択を外す
        - 未選択の座席は上限未満のときだけ追加し、上限に達していれば何もしない
        """
        if not seat_map.is_selectable(seat):
            return current
        if seat in current:
            return current.removed(seat)
        if len(current) < limit:
            return current.added(seat)
        return current
