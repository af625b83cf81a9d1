from .trip_catalog import TripCatalog as TripCatalog
