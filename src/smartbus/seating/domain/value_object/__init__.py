from .seat import Seat as Seat
from .seat_number import SeatNumber as SeatNumber
from .seat_selection import SeatSelection as SeatSelection
