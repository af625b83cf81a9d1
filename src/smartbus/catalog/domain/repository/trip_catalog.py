from abc import abstractmethod

from smartbus.catalog.domain.entity import Trip
from smartbus.shared.domain import LocationId, Repository, TripId


class TripCatalog(Repository[Trip, TripId]):
    """便カタログのインターフェース

    返される便の一覧は絞り込み・並べ替え済みとして扱い、
    呼び出し側で再度フィルタリングしない。
    """

    @abstractmethod
    def find_by_id(self, trip_id: TripId) -> Trip | None:
        """便IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_route(self, origin: LocationId, destination: LocationId) -> list[Trip]:
        """区間で便を検索する"""
        raise NotImplementedError
