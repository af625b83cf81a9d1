from .booking_draft import BookingDraft as BookingDraft
from .booking_id import BookingId as BookingId
from .contact_info import ContactInfo as ContactInfo
from .fare_breakdown import FareBreakdown as FareBreakdown
from .passenger_detail import PassengerDetail as PassengerDetail
