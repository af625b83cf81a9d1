from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from smartbus.catalog.infrastructure.static_trip_catalog import StaticTripCatalog
from smartbus.config import get_settings
from smartbus.seating.applications.get_seat_map import GetSeatMapService
from smartbus.seating.domain.service import SeatInventory
from smartbus.seating.handlers.request_models import SeatMapRequest
from smartbus.seating.handlers.response_models import to_response
from smartbus.seating.infrastructure.random_seat_inventory_provider import (
    RandomSeatInventoryProvider,
)
from smartbus.shared.domain import TripId
from smartbus.shared.domain.exception import ResourceNotFoundException
from smartbus.shared.utils import error_response, validation_error_response

logger = Logger()

settings = get_settings()
inventory = SeatInventory(
    provider=RandomSeatInventoryProvider(),
    tier_increment=settings.seat_tier_increment,
)
service = GetSeatMapService(catalog=StaticTripCatalog(), inventory=inventory)


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """座席表取得 Lambda Handler"""
    logger.info("Received seat map request")

    payload = event.get("Payload", event)
    try:
        request = SeatMapRequest.model_validate(payload)
    except ValidationError as e:
        logger.warning("Invalid seat map request", extra={"errors": e.error_count()})
        return validation_error_response(e)

    try:
        seat_map = service.get(TripId(value=request.trip_id))
    except ResourceNotFoundException as e:
        logger.warning("Trip not found", extra={"trip_id": request.trip_id})
        return error_response("NOT_FOUND", str(e))

    return to_response(seat_map)
