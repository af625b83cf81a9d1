from .seat_inventory import SeatInventory as SeatInventory
