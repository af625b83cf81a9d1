from smartbus.catalog.domain.repository import TripCatalog
from smartbus.seating.domain.entity import SeatMap
from smartbus.seating.domain.service import SeatInventory
from smartbus.shared.domain import TripId
from smartbus.shared.domain.exception import ResourceNotFoundException


class GetSeatMapService:
    """座席表取得ユースケース"""

    def __init__(self, catalog: TripCatalog, inventory: SeatInventory) -> None:
        self._catalog = catalog
        self._inventory = inventory

    def get(self, trip_id: TripId) -> SeatMap:
        """便IDから座席表を取得する"""
        trip = self._catalog.find_by_id(trip_id)
        if trip is None:
            raise ResourceNotFoundException(f"Trip not found: {trip_id}")
        return self._inventory.layout(trip)
