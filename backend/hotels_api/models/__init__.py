from hotels_api.models.user import User, Session
from hotels_api.models.enrollment import Enrollment, Address
from hotels_api.models.ticket import Ticket, TicketType, TicketStatus
from hotels_api.models.hotel import Hotel, Room

__all__ = [
    "User", "Session",
    "Enrollment", "Address",
    "Ticket", "TicketType", "TicketStatus",
    "Hotel", "Room",
]
