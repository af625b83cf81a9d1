import asyncio

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from smartbus.booking.applications.booking_workflow import BookingWorkflow
from smartbus.catalog.infrastructure.location_directory import LocationDirectory
from smartbus.catalog.infrastructure.static_trip_catalog import StaticTripCatalog
from smartbus.config import get_settings
from smartbus.pricing.applications.quote_trips import QuoteTripsService
from smartbus.pricing.domain.service import PricingEngine
from smartbus.reservation.domain import Confirmation, ReservationFinalizer
from smartbus.reservation.handlers.request_models import FinalizeBookingRequest
from smartbus.reservation.handlers.response_models import to_response
from smartbus.seating.domain import SeatInventory, SeatNumber
from smartbus.seating.infrastructure.random_seat_inventory_provider import (
    RandomSeatInventoryProvider,
)
from smartbus.shared.domain import LocationId, SearchCriteria, SystemClock, TripId
from smartbus.shared.domain.exception import (
    BookingValidationException,
    BusinessRuleViolationException,
    ResourceNotFoundException,
)
from smartbus.shared.utils import error_response, validation_error_response

logger = Logger()

settings = get_settings()
directory = LocationDirectory()
quote_service = QuoteTripsService(
    catalog=StaticTripCatalog(),
    engine=PricingEngine(
        clock=SystemClock(),
        premium_zones=[LocationId(zone) for zone in settings.premium_zones],
    ),
)
inventory = SeatInventory(
    provider=RandomSeatInventoryProvider(),
    tier_increment=settings.seat_tier_increment,
)
finalizer = ReservationFinalizer(
    tax_rate=settings.tax_rate,
    service_fee=settings.service_fee,
    min_latency_seconds=settings.finalize_latency_seconds,
)


def create_workflow() -> BookingWorkflow:
    """呼び出しごとに新しい予約フローを生成する（協調オブジェクトは共有）"""
    return BookingWorkflow(
        quote_service=quote_service,
        inventory=inventory,
        finalizer=finalizer,
        logger=logger,
    )


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """予約確定 Lambda Handler

    検索 → 便選択 → 座席選択 → 乗客情報入力 → 確定 の順に予約フローを進める。
    乗客情報・連絡先の不正はすべての項目をまとめて返す。
    """

    logger.info("Received finalize booking request")

    payload = event.get("Payload", event)
    try:
        request = FinalizeBookingRequest.model_validate(payload)
    except ValidationError as e:
        logger.warning("Invalid finalize request", extra={"errors": e.error_count()})
        return validation_error_response(e)

    try:
        confirmation = _run_workflow(create_workflow(), request)
    except BookingValidationException as e:
        logger.warning("Booking validation failed", extra={"fields": sorted(e.fields)})
        return error_response(
            "BOOKING_VALIDATION_ERROR",
            str(e),
            [error.to_dict() for error in e.errors],
        )
    except ResourceNotFoundException as e:
        logger.warning("Resource not found", extra={"error": str(e)})
        return error_response("NOT_FOUND", str(e))
    except BusinessRuleViolationException as e:
        logger.exception("Business rule violation")
        return error_response("BUSINESS_RULE_VIOLATION", str(e))
    except ValueError as e:
        logger.warning("Invalid value in request", extra={"error": str(e)})
        return error_response("INVALID_REQUEST", str(e))

    return to_response(confirmation)


def _run_workflow(
    workflow: BookingWorkflow, request: FinalizeBookingRequest
) -> Confirmation:
    workflow.search(
        SearchCriteria(
            origin=directory.require(request.origin),
            destination=directory.require(request.destination),
            travel_date=request.travel_date,
            passenger_count=len(request.seats),
        )
    )
    workflow.choose_trip(TripId(value=request.trip_id))

    for seat in request.seats:
        workflow.toggle_seat(SeatNumber(seat))
    workflow.confirm_seats()

    for index, passenger in enumerate(request.passengers):
        workflow.update_passenger(
            index,
            name=passenger.name,
            age=passenger.age,
            gender=passenger.gender,
        )
    workflow.update_contact(email=request.contact.email, phone=request.contact.phone)

    return asyncio.run(workflow.finalize())
