from .enum import FactorDirection as FactorDirection
from .service import PricingContext as PricingContext
from .service import PricingEngine as PricingEngine
from .value_object import PriceFactor as PriceFactor
from .value_object import QuotedFare as QuotedFare
from .value_object import TripQuote as TripQuote
