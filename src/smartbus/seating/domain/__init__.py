from .entity import SeatMap as SeatMap
from .repository import SeatInventoryProvider as SeatInventoryProvider
from .service import SeatInventory as SeatInventory
from .value_object import Seat as Seat
from .value_object import SeatNumber as SeatNumber
from .value_object import SeatSelection as SeatSelection
