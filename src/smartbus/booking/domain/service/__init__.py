from .booking_transitions import can_confirm_seats as can_confirm_seats
from .booking_transitions import can_finalize as can_finalize
from .booking_transitions import can_search as can_search
from .booking_transitions import choose_trip as choose_trip
from .booking_transitions import complete as complete
from .booking_transitions import confirm_seats as confirm_seats
from .booking_transitions import go_back as go_back
from .booking_transitions import restart as restart
from .booking_transitions import submit_search as submit_search
from .booking_transitions import toggle_seat as toggle_seat
from .booking_transitions import update_contact as update_contact
from .booking_transitions import update_criteria as update_criteria
from .booking_transitions import update_passenger as update_passenger
