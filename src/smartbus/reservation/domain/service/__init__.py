from .reservation_finalizer import ReservationFinalizer as ReservationFinalizer
