from .price_factor import PriceFactor as PriceFactor
from .quoted_fare import QuotedFare as QuotedFare
from .trip_quote import TripQuote as TripQuote
