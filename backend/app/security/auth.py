"""
认证模块

Bearer token 为 HS256 JWT（userId 声明），并且必须存在对应的登录会话。
认证失败统一抛出 UnauthorizedError，由全局错误处理转换为 401。
"""
import bcrypt
import logging
from datetime import datetime, timedelta, UTC
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt
from sqlalchemy.orm import Session
from app.config import settings
from app.database import get_db
from app.errors import unauthorized_error
from app.repositories.session_repository import SessionRepository

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_password_hash(password: str) -> str:
    """密码哈希"""
    salt = bcrypt.gensalt()
    return bcrypt.hashpw(password.encode('utf-8'), salt).decode('utf-8')


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """验证密码"""
    return bcrypt.checkpw(plain_password.encode('utf-8'), hashed_password.encode('utf-8'))


def create_access_token(user_id: int) -> str:
    """创建 JWT token"""
    expire = datetime.now(UTC) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode = {
        "userId": user_id,
        "exp": expire
    }
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_token(token: str) -> dict:
    """解码 JWT token"""
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        raise unauthorized_error()


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db)
) -> int:
    """获取当前登录用户 ID"""
    if credentials is None:
        raise unauthorized_error()

    token = credentials.credentials
    payload = decode_token(token)

    user_id = payload.get("userId")
    if not isinstance(user_id, int):
        raise unauthorized_error()

    session = SessionRepository(db).find_by_token(token)
    if not session:
        logger.debug("No session for token of user %s", user_id)
        raise unauthorized_error()

    return user_id
