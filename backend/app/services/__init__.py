# Business Services
from app.services.hotel_service import HotelService
from app.services.auth_service import AuthService

__all__ = ['HotelService', 'AuthService']
