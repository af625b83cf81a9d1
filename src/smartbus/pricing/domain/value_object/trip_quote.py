from dataclasses import dataclass

from smartbus.catalog.domain.entity import Trip

from .quoted_fare import QuotedFare


@dataclass(frozen=True)
class TripQuote:
    """一覧に表示する便と見積運賃の組"""

    trip: Trip
    quote: QuotedFare
