"""
报名仓储
"""
from typing import Optional

from sqlalchemy.orm import Session, joinedload

from app.models.entities import Enrollment


class EnrollmentRepository:
    """Enrollment 仓储"""

    def __init__(self, db_session: Session):
        self._db = db_session

    def find_with_address_by_user_id(self, user_id: int) -> Optional[Enrollment]:
        """根据用户 ID 获取报名（同时加载地址），不存在返回 None"""
        return (
            self._db.query(Enrollment)
            .options(joinedload(Enrollment.address))
            .filter(Enrollment.user_id == user_id)
            .first()
        )
