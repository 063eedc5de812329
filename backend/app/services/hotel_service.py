"""
酒店服务

校验用户是否可以查看酒店：已报名、有门票、门票非 RESERVED、
票种非线上且包含酒店。校验通过后直接返回仓储查询结果。
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.errors import cannot_list_hotels_error, not_found_error
from app.models.entities import Hotel, Room, Ticket, TicketStatus
from app.repositories.enrollment_repository import EnrollmentRepository
from app.repositories.hotel_repository import HotelRepository
from app.repositories.ticket_repository import TicketRepository

logger = logging.getLogger(__name__)


def _ineligibility_reason(ticket: Optional[Ticket]) -> Optional[str]:
    """返回门票不满足条件的原因，满足时返回 None（仅用于日志）"""
    if ticket is None:
        return "no ticket"
    if ticket.status == TicketStatus.RESERVED:
        return "ticket not paid"
    if ticket.ticket_type.is_remote:
        return "remote ticket"
    if not ticket.ticket_type.includes_hotel:
        return "ticket without hotel"
    return None


class HotelService:
    """酒店服务"""

    def __init__(
        self,
        db: Session,
        enrollment_repository: Optional[EnrollmentRepository] = None,
        ticket_repository: Optional[TicketRepository] = None,
        hotel_repository: Optional[HotelRepository] = None,
    ):
        # 支持注入仓储，便于测试
        self._enrollment_repo = enrollment_repository or EnrollmentRepository(db)
        self._ticket_repo = ticket_repository or TicketRepository(db)
        self._hotel_repo = hotel_repository or HotelRepository(db)

    def _check_user_can_list_hotels(self, user_id: int) -> None:
        """
        校验用户查看酒店的资格

        Raises:
            ApplicationError: 没有报名时为 NotFoundError，
                门票不满足条件时为 CannotListHotelsError
        """
        enrollment = self._enrollment_repo.find_with_address_by_user_id(user_id)
        if not enrollment:
            logger.info("User %s has no enrollment", user_id)
            raise not_found_error()

        ticket = self._ticket_repo.find_ticket_by_enrollment_id(enrollment.id)
        reason = _ineligibility_reason(ticket)
        if reason:
            logger.info("User %s can not list hotels: %s", user_id, reason)
            raise cannot_list_hotels_error()

    def get_hotels(self, user_id: int) -> List[Hotel]:
        """获取所有酒店"""
        self._check_user_can_list_hotels(user_id)
        return self._hotel_repo.find_hotels()

    def get_hotels_with_rooms(self, user_id: int, hotel_id: int) -> List[Room]:
        """
        获取酒店的房间列表

        注意：只返回房间列表，不包含酒店本身
        """
        self._check_user_can_list_hotels(user_id)
        return self._hotel_repo.find_rooms_by_hotel_id(hotel_id)
