from .clock_time import ClockTime as ClockTime
from .currency import Currency as Currency
from .location_id import LocationId as LocationId
from .money import Money as Money
from .search_criteria import SearchCriteria as SearchCriteria
from .trip_id import TripId as TripId
