from aws_lambda_powertools import Logger

from smartbus.booking.domain import BookingState, BookingStep
from smartbus.booking.domain import service as transitions
from smartbus.pricing.applications.quote_trips import QuoteTripsService
from smartbus.reservation.domain import (
    Confirmation,
    ContactInfo,
    PassengerDetail,
    ReservationFinalizer,
)
from smartbus.seating.domain import SeatInventory, SeatNumber
from smartbus.shared.domain import SearchCriteria, TripId
from smartbus.shared.domain.exception import (
    InvalidTransitionException,
    ResourceNotFoundException,
    SubmissionInProgressException,
)
from smartbus.shared.utils import get_logger


class BookingWorkflow:
    """予約フローのユースケース

    1 人の利用者の予約フローの状態を保持し、各ステップの協調オブジェクトを呼び出す。
    状態の遷移そのものは booking_transitions の純粋関数に委譲する。
    予約確定の処理中は下書きを変更する操作も含め、すべての操作を拒否する（キューイングしない）。
    """

    def __init__(
        self,
        quote_service: QuoteTripsService,
        inventory: SeatInventory,
        finalizer: ReservationFinalizer,
        logger: Logger | None = None,
    ) -> None:
        self._quote_service = quote_service
        self._inventory = inventory
        self._finalizer = finalizer
        self._logger = logger or get_logger("booking-service")
        self._state = transitions.restart()
        self._submitting = False

    @property
    def state(self) -> BookingState:
        return self._state

    @property
    def step(self) -> BookingStep:
        return self._state.step

    @property
    def is_submitting(self) -> bool:
        return self._submitting

    @property
    def can_search(self) -> bool:
        return transitions.can_search(self._state)

    @property
    def can_confirm_seats(self) -> bool:
        return transitions.can_confirm_seats(self._state)

    @property
    def can_finalize(self) -> bool:
        return not self._submitting and transitions.can_finalize(
            self._state, self._finalizer
        )

    def update_criteria(self, **changes: object) -> BookingState:
        """検索条件の一部を変更する"""
        self._ensure_idle()
        criteria = self._state.draft.criteria.updated(**changes)
        return self._move(transitions.update_criteria(self._state, criteria))

    def search(self, criteria: SearchCriteria | None = None) -> BookingState:
        """検索を実行し、便一覧のステップに進む"""
        self._ensure_idle()
        criteria = criteria or self._state.draft.criteria
        listings = self._quote_service.list_quotes(criteria)
        return self._move(
            transitions.submit_search(self._state, criteria, tuple(listings))
        )

    def choose_trip(self, trip_id: TripId) -> BookingState:
        """一覧から便を選び、座席選択のステップに進む"""
        self._ensure_idle()
        if self._state.step != BookingStep.TRIP_LISTED:
            raise InvalidTransitionException(
                f"Cannot choose a trip at step {self._state.step.name}"
            )
        listing = self._state.find_listing(trip_id)
        if listing is None:
            raise ResourceNotFoundException(f"Trip not listed: {trip_id}")

        seat_map = self._inventory.layout(listing.trip)
        return self._move(
            transitions.choose_trip(
                self._state, listing.trip, listing.quote, seat_map
            )
        )

    def toggle_seat(self, seat: SeatNumber) -> BookingState:
        self._ensure_idle()
        return self._move(transitions.toggle_seat(self._state, seat))

    def confirm_seats(self) -> BookingState:
        self._ensure_idle()
        return self._move(transitions.confirm_seats(self._state))

    def update_passenger(self, index: int, **changes: object) -> BookingState:
        """乗客情報の一部を変更する"""
        self._ensure_idle()
        passengers = self._state.draft.passengers
        in_range = 0 <= index < len(passengers)
        current = passengers[index] if in_range else PassengerDetail()
        return self._move(
            transitions.update_passenger(
                self._state, index, current.updated(**changes)
            )
        )

    def update_contact(self, **changes: object) -> BookingState:
        self._ensure_idle()
        contact: ContactInfo = self._state.draft.contact.updated(**changes)
        return self._move(transitions.update_contact(self._state, contact))

    async def finalize(self) -> Confirmation:
        """予約を確定する

        Raises:
            SubmissionInProgressException: 確定処理がすでに実行中の場合
            InvalidTransitionException: 乗客情報入力のステップでない場合
            BookingValidationException: 入力に不正な項目がある場合（状態は変わらない）
        """
        self._ensure_idle()
        if self._state.step != BookingStep.PASSENGER_CAPTURE:
            raise InvalidTransitionException(
                f"Cannot complete booking at step {self._state.step.name}"
            )

        # 待機中の状態変更は _ensure_idle で拒否される
        submitted = self._state
        self._submitting = True
        try:
            confirmation = await self._finalizer.finalize(submitted.draft)
        finally:
            self._submitting = False

        self._move(transitions.complete(submitted, confirmation))
        self._logger.info(
            "Booking confirmed",
            extra={
                "booking_id": str(confirmation.booking_id),
                "total_amount": str(confirmation.total_amount.amount),
            },
        )
        return confirmation

    def go_back(self, target: BookingStep) -> BookingState:
        self._ensure_idle()
        return self._move(transitions.go_back(self._state, target))

    def restart(self) -> BookingState:
        self._ensure_idle()
        return self._move(transitions.restart())

    def _ensure_idle(self) -> None:
        if self._submitting:
            raise SubmissionInProgressException(
                "Booking submission already in progress"
            )

    def _move(self, state: BookingState) -> BookingState:
        if state.step != self._state.step:
            self._logger.info(
                "Booking step changed",
                extra={"from_step": self._state.step.name, "to_step": state.step.name},
            )
        self._state = state
        return state
