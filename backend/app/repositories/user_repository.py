"""
用户仓储
"""
from typing import Optional

from sqlalchemy.orm import Session

from app.models.entities import User


class UserRepository:
    """User 仓储"""

    def __init__(self, db_session: Session):
        self._db = db_session

    def find_by_email(self, email: str) -> Optional[User]:
        return self._db.query(User).filter(User.email == email).first()
