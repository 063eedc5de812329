# Persistence Models
from app.models.entities import (
    User, Session, Enrollment, Address, TicketType, Ticket, TicketStatus,
    Payment, Hotel, Room
)

__all__ = [
    'User', 'Session', 'Enrollment', 'Address', 'TicketType', 'Ticket',
    'TicketStatus', 'Payment', 'Hotel', 'Room'
]
