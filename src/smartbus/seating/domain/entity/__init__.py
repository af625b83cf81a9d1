from .seat_map import SeatMap as SeatMap
