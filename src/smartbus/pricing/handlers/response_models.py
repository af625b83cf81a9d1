from __future__ import annotations

from pydantic import BaseModel

from smartbus.pricing.domain.value_object import PriceFactor, TripQuote

TOP_FACTOR_COUNT = 3


class PriceFactorData(BaseModel):
    """料金調整要因のレスポンスモデル"""

    label: str
    multiplier: str
    direction: str
    change: str


class TripQuoteData(BaseModel):
    """見積付き便データのレスポンスモデル"""

    trip_id: str
    operator_name: str
    departure_time: str
    arrival_time: str
    duration: str
    service_class: str
    seats_available: int
    rating: float
    amenities: list[str]
    base_price: str
    final_price: str
    currency: str
    price_difference: str
    percentage_change: str
    top_factors: list[PriceFactorData]
    more_factors: int
    factors: list[PriceFactorData]


class QuoteTripsData(BaseModel):
    """便一覧データのレスポンスモデル"""

    origin: str
    destination: str
    travel_date: str
    passenger_count: int
    trips: list[TripQuoteData]


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: QuoteTripsData


def _factor_data(factor: PriceFactor) -> PriceFactorData:
    return PriceFactorData(
        label=factor.label,
        multiplier=str(factor.multiplier),
        direction=factor.direction.value,
        change=factor.change_label(),
    )


def _trip_quote_data(item: TripQuote) -> TripQuoteData:
    trip, quote = item.trip, item.quote
    top = quote.top_factors(TOP_FACTOR_COUNT)
    return TripQuoteData(
        trip_id=str(trip.id),
        operator_name=trip.operator_name,
        departure_time=str(trip.departure_time),
        arrival_time=str(trip.arrival_time),
        duration=trip.duration_label(),
        service_class=str(trip.service_class),
        seats_available=trip.seats_available,
        rating=trip.rating,
        amenities=sorted(trip.amenities),
        base_price=str(quote.base_price.amount),
        final_price=str(quote.final_price.amount),
        currency=str(quote.final_price.currency),
        price_difference=str(quote.price_difference),
        percentage_change=str(quote.percentage_change),
        top_factors=[_factor_data(factor) for factor in top],
        more_factors=len(quote.factors) - len(top),
        factors=[_factor_data(factor) for factor in quote.factors],
    )


def to_response(
    origin: str,
    destination: str,
    travel_date: str,
    passenger_count: int,
    quotes: list[TripQuote],
) -> dict:
    """見積一覧をレスポンス辞書に変換する"""
    return SuccessResponse(
        data=QuoteTripsData(
            origin=origin,
            destination=destination,
            travel_date=travel_date,
            passenger_count=passenger_count,
            trips=[_trip_quote_data(item) for item in quotes],
        )
    ).model_dump()
