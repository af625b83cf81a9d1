from decimal import Decimal

from smartbus.catalog.domain.entity import Trip
from smartbus.catalog.domain.factory import TripDetails, TripFactory
from smartbus.catalog.domain.repository import TripCatalog
from smartbus.shared.domain import LocationId, TripId

LAGOS_TRIPS: list[TripDetails] = [
    {
        "trip_id": "1",
        "operator_name": "BRT Lagos",
        "departure_time": "06:00",
        "arrival_time": "07:30",
        "service_class": "AC Standard",
        "base_fare_amount": Decimal("800"),
        "base_fare_currency": "NGN",
        "seats_available": 15,
        "rating": 4.5,
        "amenities": ["WiFi", "AC", "CCTV", "Comfortable Seats"],
    },
    {
        "trip_id": "2",
        "operator_name": "Primero Transport",
        "departure_time": "08:15",
        "arrival_time": "10:00",
        "service_class": "AC Premium",
        "base_fare_amount": Decimal("1200"),
        "base_fare_currency": "NGN",
        "seats_available": 8,
        "rating": 4.2,
        "amenities": ["WiFi", "AC", "USB Charging", "Entertainment"],
    },
    {
        "trip_id": "3",
        "operator_name": "Lagos Ride",
        "departure_time": "07:30",
        "arrival_time": "09:15",
        "service_class": "Executive",
        "base_fare_amount": Decimal("1500"),
        "base_fare_currency": "NGN",
        "seats_available": 22,
        "rating": 4.7,
        "amenities": [
            "WiFi",
            "AC",
            "Leather Seats",
            "Refreshments",
            "Entertainment",
        ],
    },
]


class StaticTripCatalog(TripCatalog):
    """固定の便一覧を返す TripCatalog の具象実装

    どの区間に対しても同じ便一覧を登録順で返す。
    """

    def __init__(
        self,
        trips: list[TripDetails] | None = None,
        factory: TripFactory | None = None,
    ) -> None:
        factory = factory or TripFactory()
        details = LAGOS_TRIPS if trips is None else trips
        self._trips: dict[TripId, Trip] = {}
        for item in details:
            trip = factory.create(item)
            self._trips[trip.id] = trip

    def find_by_id(self, trip_id: TripId) -> Trip | None:
        return self._trips.get(trip_id)

    def find_by_route(self, origin: LocationId, destination: LocationId) -> list[Trip]:
        return list(self._trips.values())
