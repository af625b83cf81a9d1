from .entity import Trip as Trip
from .factory import TripDetails as TripDetails
from .factory import TripFactory as TripFactory
from .repository import TripCatalog as TripCatalog
from .value_object import ServiceClass as ServiceClass
