from abc import ABC, abstractmethod

from smartbus.catalog.domain.entity import Trip
from smartbus.seating.domain.value_object import SeatNumber


class SeatInventoryProvider(ABC):
    """座席の予約済み状況の供給元インターフェース

    予約済み座席の決め方はドメインの関心外とし、座席ごとの真偽値として受け取る。
    """

    @abstractmethod
    def occupied_seats(self, trip: Trip) -> frozenset[SeatNumber]:
        """便の予約済み座席を返す"""
        raise NotImplementedError
