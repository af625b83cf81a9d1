from __future__ import annotations

from dataclasses import dataclass, field, replace

from smartbus.catalog.domain.entity import Trip
from smartbus.pricing.domain.value_object import QuotedFare
from smartbus.seating.domain.entity import SeatMap
from smartbus.seating.domain.value_object import SeatSelection
from smartbus.shared.domain import SearchCriteria

from .contact_info import ContactInfo
from .passenger_detail import PassengerDetail


@dataclass(frozen=True)
class BookingDraft:
    """予約の下書き

    予約フローの各ステップで集めた情報を保持する。
    後続ステップの項目は、そのステップに到達するまで空のまま。
    """

    criteria: SearchCriteria = field(default_factory=SearchCriteria)
    trip: Trip | None = None
    quote: QuotedFare | None = None
    seat_map: SeatMap | None = None
    selection: SeatSelection = field(default_factory=SeatSelection)
    passengers: tuple[PassengerDetail, ...] = ()
    contact: ContactInfo = field(default_factory=ContactInfo)

    def __post_init__(self) -> None:
        object.__setattr__(self, "passengers", tuple(self.passengers))

    def updated(self, **changes: object) -> BookingDraft:
        return replace(self, **changes)
