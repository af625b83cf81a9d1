from .entity import Confirmation as Confirmation
from .enum import Gender as Gender
from .service import ReservationFinalizer as ReservationFinalizer
from .value_object import (
    BookingDraft as BookingDraft,
)
from .value_object import (
    BookingId as BookingId,
)
from .value_object import (
    ContactInfo as ContactInfo,
)
from .value_object import (
    FareBreakdown as FareBreakdown,
)
from .value_object import (
    PassengerDetail as PassengerDetail,
)
