"""予約フローの遷移関数

SEARCHING -> TRIP_LISTED -> SEAT_SELECTING -> PASSENGER_CAPTURE -> CONFIRMED

- 許可されていない遷移は InvalidTransitionException
- ガード条件を満たさない遷移は BusinessRuleViolationException
- 座席選択の制約違反は例外にせず、状態を変えない
"""

from smartbus.booking.domain.enum import BookingStep
from smartbus.booking.domain.value_object import BookingState
from smartbus.catalog.domain.entity import Trip
from smartbus.pricing.domain.value_object import QuotedFare, TripQuote
from smartbus.reservation.domain import (
    BookingDraft,
    Confirmation,
    ContactInfo,
    PassengerDetail,
    ReservationFinalizer,
)
from smartbus.seating.domain import SeatInventory, SeatMap, SeatNumber, SeatSelection
from smartbus.shared.domain import SearchCriteria
from smartbus.shared.domain.exception import (
    BusinessRuleViolationException,
    InvalidTransitionException,
)


def _require_step(state: BookingState, step: BookingStep, action: str) -> None:
    if state.step != step:
        raise InvalidTransitionException(
            f"Cannot {action} at step {state.step.name} (requires {step.name})"
        )


def can_search(state: BookingState) -> bool:
    return state.step == BookingStep.SEARCHING and state.draft.criteria.is_complete


def can_confirm_seats(state: BookingState) -> bool:
    draft = state.draft
    return state.step == BookingStep.SEAT_SELECTING and draft.selection.is_complete(
        draft.criteria.passenger_count
    )


def can_finalize(state: BookingState, finalizer: ReservationFinalizer) -> bool:
    """確定ボタンを有効にできるかどうか"""
    draft = state.draft
    return (
        state.step == BookingStep.PASSENGER_CAPTURE
        and len(draft.passengers) == len(draft.selection)
        and finalizer.is_valid(draft)
    )


def update_criteria(state: BookingState, criteria: SearchCriteria) -> BookingState:
    """検索条件を差し替える（検索前のみ）"""
    _require_step(state, BookingStep.SEARCHING, "edit search criteria")
    return state.updated(draft=state.draft.updated(criteria=criteria))


def submit_search(
    state: BookingState,
    criteria: SearchCriteria,
    listings: tuple[TripQuote, ...] = (),
) -> BookingState:
    _require_step(state, BookingStep.SEARCHING, "submit search")
    if not criteria.is_complete:
        raise BusinessRuleViolationException(
            f"Search criteria is incomplete: {', '.join(criteria.missing_fields())}"
        )
    return BookingState(
        step=BookingStep.TRIP_LISTED,
        draft=BookingDraft(criteria=criteria),
        listings=tuple(listings),
    )


def choose_trip(
    state: BookingState,
    trip: Trip,
    quote: QuotedFare,
    seat_map: SeatMap,
) -> BookingState:
    _require_step(state, BookingStep.TRIP_LISTED, "choose a trip")
    if quote.trip_id != trip.id or seat_map.trip_id != trip.id:
        raise BusinessRuleViolationException(
            "Quote and seat map must belong to the chosen trip"
        )
    draft = state.draft.updated(
        trip=trip,
        quote=quote,
        seat_map=seat_map,
        selection=SeatSelection(),
    )
    return state.updated(step=BookingStep.SEAT_SELECTING, draft=draft)


def toggle_seat(state: BookingState, seat: SeatNumber) -> BookingState:
    _require_step(state, BookingStep.SEAT_SELECTING, "select seats")
    draft = state.draft
    selection = SeatInventory.select(
        draft.seat_map,
        draft.selection,
        seat,
        draft.criteria.passenger_count,
    )
    if selection is draft.selection:
        return state
    return state.updated(draft=draft.updated(selection=selection))


def confirm_seats(state: BookingState) -> BookingState:
    _require_step(state, BookingStep.SEAT_SELECTING, "confirm seats")
    if not can_confirm_seats(state):
        raise BusinessRuleViolationException(
            f"Select exactly {state.draft.criteria.passenger_count} seat(s) "
            f"({len(state.draft.selection)} selected)"
        )
    passengers = tuple(PassengerDetail() for _ in state.draft.selection)
    return state.updated(
        step=BookingStep.PASSENGER_CAPTURE,
        draft=state.draft.updated(passengers=passengers),
    )


def update_passenger(
    state: BookingState, index: int, passenger: PassengerDetail
) -> BookingState:
    _require_step(state, BookingStep.PASSENGER_CAPTURE, "edit passengers")
    passengers = list(state.draft.passengers)
    if not 0 <= index < len(passengers):
        raise BusinessRuleViolationException(f"No passenger at index {index}")
    passengers[index] = passenger
    return state.updated(draft=state.draft.updated(passengers=tuple(passengers)))


def update_contact(state: BookingState, contact: ContactInfo) -> BookingState:
    _require_step(state, BookingStep.PASSENGER_CAPTURE, "edit contact")
    return state.updated(draft=state.draft.updated(contact=contact))


def complete(state: BookingState, confirmation: Confirmation) -> BookingState:
    _require_step(state, BookingStep.PASSENGER_CAPTURE, "complete booking")
    return state.updated(step=BookingStep.CONFIRMED, confirmation=confirmation)


def go_back(state: BookingState, target: BookingStep) -> BookingState:
    """前のステップに戻る

    戻り先のステップの入力は残し、それより後のステップの入力を破棄する。
    """
    if state.step == BookingStep.CONFIRMED:
        raise InvalidTransitionException("Cannot go back from a confirmed booking")
    if target >= state.step:
        raise InvalidTransitionException(
            f"Cannot go back from {state.step.name} to {target.name}"
        )

    draft = state.draft
    if target == BookingStep.SEARCHING:
        return BookingState(draft=BookingDraft(criteria=draft.criteria))
    if target == BookingStep.TRIP_LISTED:
        return BookingState(
            step=target,
            draft=BookingDraft(criteria=draft.criteria),
            listings=state.listings,
        )
    # SEAT_SELECTING
    return state.updated(
        step=target,
        draft=draft.updated(passengers=(), contact=ContactInfo()),
    )


def restart() -> BookingState:
    return BookingState()
