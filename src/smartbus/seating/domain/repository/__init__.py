from .seat_inventory_provider import SeatInventoryProvider as SeatInventoryProvider
