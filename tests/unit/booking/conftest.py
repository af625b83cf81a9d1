import pytest

from smartbus.booking.applications.booking_workflow import BookingWorkflow
from smartbus.catalog.infrastructure.static_trip_catalog import StaticTripCatalog
from smartbus.pricing.applications.quote_trips import QuoteTripsService
from smartbus.pricing.domain import PricingEngine
from smartbus.reservation.domain import BookingId, ReservationFinalizer
from smartbus.seating.domain import SeatInventory, SeatNumber


@pytest.fixture
def inventory(occupancy_provider):
    """B2 のみ予約済みの SeatInventory"""
    occupancy_provider.occupied_seats.return_value = frozenset({SeatNumber("B2")})
    return SeatInventory(provider=occupancy_provider)


@pytest.fixture
def create_workflow(fixed_clock, inventory):
    """BookingWorkflow を生成する Factory fixture"""

    def _factory(min_latency_seconds: float = 0) -> BookingWorkflow:
        return BookingWorkflow(
            quote_service=QuoteTripsService(
                catalog=StaticTripCatalog(),
                engine=PricingEngine(clock=fixed_clock()),
            ),
            inventory=inventory,
            finalizer=ReservationFinalizer(
                min_latency_seconds=min_latency_seconds,
                id_generator=lambda: BookingId("LG0123456789AB"),
            ),
        )

    return _factory
