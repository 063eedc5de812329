"""
门票仓储
"""
from typing import Optional

from sqlalchemy.orm import Session, joinedload

from app.models.entities import Ticket


class TicketRepository:
    """Ticket 仓储"""

    def __init__(self, db_session: Session):
        self._db = db_session

    def find_ticket_by_enrollment_id(self, enrollment_id: int) -> Optional[Ticket]:
        """根据报名 ID 获取门票（同时加载票种），不存在返回 None"""
        return (
            self._db.query(Ticket)
            .options(joinedload(Ticket.ticket_type))
            .filter(Ticket.enrollment_id == enrollment_id)
            .first()
        )
