from __future__ import annotations

from dataclasses import dataclass, field, replace

from smartbus.booking.domain.enum import BookingStep
from smartbus.pricing.domain.value_object import TripQuote
from smartbus.reservation.domain import BookingDraft, Confirmation
from smartbus.shared.domain import TripId


@dataclass(frozen=True)
class BookingState:
    """予約フローの状態

    遷移関数はこの状態を変更せず、常に新しい状態を返す。
    confirmation は CONFIRMED のときだけ設定される。
    """

    step: BookingStep = BookingStep.SEARCHING
    draft: BookingDraft = field(default_factory=BookingDraft)
    listings: tuple[TripQuote, ...] = ()
    confirmation: Confirmation | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "listings", tuple(self.listings))

    def updated(self, **changes: object) -> BookingState:
        return replace(self, **changes)

    def find_listing(self, trip_id: TripId) -> TripQuote | None:
        """一覧から便IDに一致する見積を返す"""
        for listing in self.listings:
            if listing.trip.id == trip_id:
                return listing
        return None
