from .trip import Trip as Trip
