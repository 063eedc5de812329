"""
会话仓储
"""
from typing import Optional

from sqlalchemy.orm import Session as DbSession

from app.models.entities import Session


class SessionRepository:
    """Session 仓储"""

    def __init__(self, db_session: DbSession):
        self._db = db_session

    def create(self, user_id: int, token: str) -> Session:
        """创建会话"""
        session = Session(user_id=user_id, token=token)
        self._db.add(session)
        self._db.commit()
        self._db.refresh(session)
        return session

    def find_by_token(self, token: str) -> Optional[Session]:
        return self._db.query(Session).filter(Session.token == token).first()
