from smartbus.catalog.domain.repository import TripCatalog
from smartbus.pricing.domain.service import PricingEngine
from smartbus.pricing.domain.value_object import TripQuote
from smartbus.shared.domain import SearchCriteria
from smartbus.shared.domain.exception import BusinessRuleViolationException


class QuoteTripsService:
    """便一覧の見積ユースケース

    カタログから区間の便を取得し、1 便ずつ見積を算出する。
    """

    def __init__(self, catalog: TripCatalog, engine: PricingEngine) -> None:
        self._catalog = catalog
        self._engine = engine

    def list_quotes(self, criteria: SearchCriteria) -> list[TripQuote]:
        """検索条件に合う便を見積付きで返す"""
        if not criteria.is_complete:
            raise BusinessRuleViolationException(
                f"Search criteria is incomplete: {', '.join(criteria.missing_fields())}"
            )

        trips = self._catalog.find_by_route(criteria.origin, criteria.destination)
        return [
            TripQuote(trip=trip, quote=self._engine.quote(trip, criteria))
            for trip in trips
        ]
