from .enum import BookingStep as BookingStep
from .value_object import BookingState as BookingState
