from enum import IntEnum


class BookingStep(IntEnum):
    """予約フローのステップ

    値の大小がステップの前後関係を表す。
    """

    SEARCHING = 1
    TRIP_LISTED = 2
    SEAT_SELECTING = 3
    PASSENGER_CAPTURE = 4
    CONFIRMED = 5
