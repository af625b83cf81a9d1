from .trip_factory import TripDetails as TripDetails
from .trip_factory import TripFactory as TripFactory
