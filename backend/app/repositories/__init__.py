# Repositories
from app.repositories.hotel_repository import HotelRepository
from app.repositories.enrollment_repository import EnrollmentRepository
from app.repositories.ticket_repository import TicketRepository
from app.repositories.user_repository import UserRepository
from app.repositories.session_repository import SessionRepository

__all__ = [
    'HotelRepository', 'EnrollmentRepository', 'TicketRepository',
    'UserRepository', 'SessionRepository'
]
