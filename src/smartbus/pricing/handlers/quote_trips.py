from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from smartbus.catalog.infrastructure.location_directory import LocationDirectory
from smartbus.catalog.infrastructure.static_trip_catalog import StaticTripCatalog
from smartbus.config import get_settings
from smartbus.pricing.applications.quote_trips import QuoteTripsService
from smartbus.pricing.domain.service import PricingEngine
from smartbus.pricing.handlers.request_models import QuoteTripsRequest
from smartbus.pricing.handlers.response_models import to_response
from smartbus.shared.domain import LocationId, SearchCriteria, SystemClock
from smartbus.shared.domain.exception import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)
from smartbus.shared.utils import error_response, validation_error_response

logger = Logger()

settings = get_settings()
directory = LocationDirectory()
engine = PricingEngine(
    clock=SystemClock(),
    premium_zones=[LocationId(zone) for zone in settings.premium_zones],
)
service = QuoteTripsService(catalog=StaticTripCatalog(), engine=engine)


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """便検索（見積付き）Lambda Handler

    出発地・到着地・乗車日・乗客数を受け取り、便ごとの見積運賃を返す。
    """

    logger.info("Received quote trips request")

    payload = event.get("Payload", event)
    try:
        request = QuoteTripsRequest.model_validate(payload)
    except ValidationError as e:
        logger.warning("Invalid quote request", extra={"errors": e.error_count()})
        return validation_error_response(e)

    try:
        criteria = SearchCriteria(
            origin=directory.require(request.origin),
            destination=directory.require(request.destination),
            travel_date=request.travel_date,
            passenger_count=request.passenger_count,
        )
    except (ValueError, ResourceNotFoundException) as e:
        logger.warning("Unknown location", extra={"error": str(e)})
        return error_response("NOT_FOUND", str(e))

    try:
        quotes = service.list_quotes(criteria)
    except BusinessRuleViolationException as e:
        logger.exception("Failed to quote trips")
        return error_response("BUSINESS_RULE_VIOLATION", str(e))

    logger.info(
        "Quoted trips",
        extra={
            "origin": str(criteria.origin),
            "destination": str(criteria.destination),
            "count": len(quotes),
        },
    )
    return to_response(
        origin=directory.label(criteria.origin),
        destination=directory.label(criteria.destination),
        travel_date=request.travel_date.isoformat(),
        passenger_count=request.passenger_count,
        quotes=quotes,
    )
