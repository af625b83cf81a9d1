import pytest

from smartbus.pricing.domain import PricingEngine
from smartbus.reservation.domain import (
    BookingDraft,
    BookingId,
    ContactInfo,
    Gender,
    PassengerDetail,
    ReservationFinalizer,
)
from smartbus.seating.domain import SeatInventory, SeatNumber, SeatSelection


@pytest.fixture
def finalizer():
    """待ち時間なし・予約ID固定の ReservationFinalizer"""
    return ReservationFinalizer(
        min_latency_seconds=0,
        id_generator=lambda: BookingId("LG0123456789AB"),
    )


@pytest.fixture
def create_draft(create_trip, create_criteria, occupancy_provider, fixed_clock):
    """BookingDraft を生成する Factory fixture（既定は 893 NGN x 2 席、全項目入力済み）"""

    def _factory(
        seats: tuple[str, ...] = ("A1", "A2"),
        passengers: tuple[PassengerDetail, ...] | None = None,
        contact: ContactInfo | None = None,
    ) -> BookingDraft:
        trip = create_trip()
        criteria = create_criteria(passenger_count=len(seats))
        if passengers is None:
            passengers = tuple(
                PassengerDetail(name=f"Passenger {i}", age=30, gender=Gender.FEMALE)
                for i in range(len(seats))
            )
        return BookingDraft(
            criteria=criteria,
            trip=trip,
            quote=PricingEngine(clock=fixed_clock()).quote(trip, criteria),
            seat_map=SeatInventory(provider=occupancy_provider).layout(trip),
            selection=SeatSelection(seats=tuple(SeatNumber(s) for s in seats)),
            passengers=passengers,
            contact=contact or ContactInfo(email="ada@example.com", phone="08012345678"),
        )

    return _factory
