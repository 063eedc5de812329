"""
认证服务 - 登录并创建会话
"""
from typing import Optional
from sqlalchemy.orm import Session

from app.errors import invalid_credentials_error
from app.repositories.session_repository import SessionRepository
from app.repositories.user_repository import UserRepository
from app.security.auth import create_access_token, verify_password


class AuthService:
    """认证服务"""

    def __init__(
        self,
        db: Session,
        user_repository: Optional[UserRepository] = None,
        session_repository: Optional[SessionRepository] = None,
    ):
        self._user_repo = user_repository or UserRepository(db)
        self._session_repo = session_repository or SessionRepository(db)

    def sign_in(self, email: str, password: str) -> dict:
        """校验账号密码，成功后创建会话并返回 token"""
        user = self._user_repo.find_by_email(email)
        if not user or not verify_password(password, user.password):
            raise invalid_credentials_error()

        token = create_access_token(user.id)
        self._session_repo.create(user.id, token)
        return {
            "user": {"id": user.id, "email": user.email},
            "token": token,
        }
