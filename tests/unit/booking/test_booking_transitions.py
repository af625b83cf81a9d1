import pytest

from smartbus.booking.domain import BookingState, BookingStep
from smartbus.booking.domain import service as transitions
from smartbus.pricing.domain import PricingEngine
from smartbus.reservation.domain import (
    BookingId,
    Confirmation,
    ContactInfo,
    Gender,
    PassengerDetail,
    ReservationFinalizer,
)
from smartbus.seating.domain import SeatNumber
from smartbus.shared.domain import Money, SearchCriteria
from smartbus.shared.domain.exception import (
    BusinessRuleViolationException,
    InvalidTransitionException,
)


@pytest.fixture
def listed(create_criteria):
    """便一覧のステップ（乗客 2 名）"""
    return transitions.submit_search(BookingState(), create_criteria(passenger_count=2))


@pytest.fixture
def selecting(listed, create_trip, fixed_clock, inventory):
    """座席選択のステップ"""
    trip = create_trip()
    quote = PricingEngine(clock=fixed_clock()).quote(trip, listed.draft.criteria)
    return transitions.choose_trip(listed, trip, quote, inventory.layout(trip))


@pytest.fixture
def capturing(selecting):
    """乗客情報入力のステップ（A1, A2 を選択済み）"""
    state = transitions.toggle_seat(selecting, SeatNumber("A1"))
    state = transitions.toggle_seat(state, SeatNumber("A2"))
    return transitions.confirm_seats(state)


@pytest.fixture
def filled(capturing):
    """乗客情報と連絡先を入力済みの状態"""
    state = capturing
    for index, name in enumerate(["Ada", "Tunde"]):
        state = transitions.update_passenger(
            state, index, PassengerDetail(name=name, age=30, gender=Gender.OTHER)
        )
    return transitions.update_contact(
        state, ContactInfo(email="ada@example.com", phone="08012345678")
    )


class TestSearch:
    """検索ステップのテスト"""

    def test_initial_state(self):
        state = transitions.restart()
        assert state.step == BookingStep.SEARCHING
        assert not transitions.can_search(state)

    def test_submit_search_moves_to_trip_listed(self, listed):
        assert listed.step == BookingStep.TRIP_LISTED
        assert listed.draft.criteria.passenger_count == 2
        assert listed.draft.trip is None

    def test_incomplete_criteria_cannot_be_submitted(self):
        state = transitions.update_criteria(BookingState(), SearchCriteria(passenger_count=2))

        with pytest.raises(BusinessRuleViolationException, match="destination"):
            transitions.submit_search(state, state.draft.criteria)

    def test_criteria_cannot_change_after_search(self, listed, create_criteria):
        with pytest.raises(InvalidTransitionException):
            transitions.update_criteria(listed, create_criteria())


class TestSeatSelection:
    """座席選択ステップのテスト"""

    def test_choose_trip_starts_empty_selection(self, selecting):
        assert selecting.step == BookingStep.SEAT_SELECTING
        assert len(selecting.draft.selection) == 0
        assert selecting.draft.quote.final_price == Money.ngn(893)

    def test_choose_trip_rejects_mismatched_quote(self, listed, create_trip, fixed_clock, inventory):
        trip, other = create_trip(trip_id="1"), create_trip(trip_id="2")
        quote = PricingEngine(clock=fixed_clock()).quote(other, listed.draft.criteria)

        with pytest.raises(BusinessRuleViolationException):
            transitions.choose_trip(listed, trip, quote, inventory.layout(trip))

    def test_toggle_same_seat_twice(self, selecting):
        """同じ座席を 2 回選ぶと選択数は 0 に戻る"""
        state = transitions.toggle_seat(selecting, SeatNumber("A1"))
        assert state.draft.selection.labels() == ["A1"]

        state = transitions.toggle_seat(state, SeatNumber("A1"))
        assert len(state.draft.selection) == 0

    def test_occupied_seat_is_a_no_op(self, selecting):
        assert transitions.toggle_seat(selecting, SeatNumber("B2")) is selecting

    def test_confirm_requires_exact_seat_count(self, selecting):
        state = transitions.toggle_seat(selecting, SeatNumber("A1"))
        assert not transitions.can_confirm_seats(state)

        with pytest.raises(BusinessRuleViolationException, match="Select exactly 2"):
            transitions.confirm_seats(state)

    def test_confirm_creates_one_passenger_per_seat(self, capturing):
        assert capturing.step == BookingStep.PASSENGER_CAPTURE
        assert capturing.draft.passengers == (PassengerDetail(), PassengerDetail())

    def test_toggle_outside_seat_selection_raises_error(self, listed):
        with pytest.raises(InvalidTransitionException):
            transitions.toggle_seat(listed, SeatNumber("A1"))


class TestPassengerCapture:
    """乗客情報入力ステップのテスト"""

    def test_can_finalize_only_when_valid(self, capturing, filled):
        finalizer = ReservationFinalizer(min_latency_seconds=0)
        assert not transitions.can_finalize(capturing, finalizer)
        assert transitions.can_finalize(filled, finalizer)

    def test_update_passenger_out_of_range_raises_error(self, capturing):
        with pytest.raises(BusinessRuleViolationException, match="No passenger at index 2"):
            transitions.update_passenger(capturing, 2, PassengerDetail(name="Ada"))

    def test_complete_moves_to_confirmed(self, filled):
        confirmation = Confirmation(
            booking_id=BookingId("LG0123456789AB"),
            draft=filled.draft,
            breakdown=ReservationFinalizer().amount(filled.draft),
        )

        state = transitions.complete(filled, confirmation)

        assert state.step == BookingStep.CONFIRMED
        assert state.confirmation is confirmation


class TestGoBack:
    """前のステップへ戻る遷移のテスト"""

    def test_back_to_seat_selection_keeps_selection(self, filled):
        state = transitions.go_back(filled, BookingStep.SEAT_SELECTING)

        assert state.step == BookingStep.SEAT_SELECTING
        assert state.draft.selection.labels() == ["A1", "A2"]
        assert state.draft.passengers == ()
        assert state.draft.contact == ContactInfo()

    def test_back_to_trip_listed_clears_trip_and_seats(self, filled):
        state = transitions.go_back(filled, BookingStep.TRIP_LISTED)

        assert state.step == BookingStep.TRIP_LISTED
        assert state.draft.criteria == filled.draft.criteria
        assert state.draft.trip is None
        assert state.draft.quote is None
        assert state.draft.seat_map is None
        assert len(state.draft.selection) == 0
        assert state.draft.passengers == ()

    def test_back_to_searching_keeps_criteria(self, selecting):
        state = transitions.go_back(selecting, BookingStep.SEARCHING)

        assert state.step == BookingStep.SEARCHING
        assert state.draft.criteria == selecting.draft.criteria
        assert state.listings == ()
        assert transitions.can_search(state)

    @pytest.mark.parametrize("target", [BookingStep.SEAT_SELECTING, BookingStep.PASSENGER_CAPTURE])
    def test_cannot_go_forward_or_stay(self, selecting, target):
        with pytest.raises(InvalidTransitionException):
            transitions.go_back(selecting, target)

    def test_cannot_leave_confirmed(self, filled):
        state = filled.updated(step=BookingStep.CONFIRMED)

        with pytest.raises(InvalidTransitionException, match="confirmed"):
            transitions.go_back(state, BookingStep.SEARCHING)
