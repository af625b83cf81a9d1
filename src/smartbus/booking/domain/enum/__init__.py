from .booking_step import BookingStep as BookingStep
