"""
数据库配置 - 持久化层
进程级连接句柄：首次使用时创建 engine，显式 init_db / close_db 管理生命周期。
仓储通过构造函数接收 Session，不直接访问全局句柄。
"""
import logging
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from app.config import settings

logger = logging.getLogger(__name__)

Base = declarative_base()

_engine: Optional[Engine] = None
_SessionLocal: Optional[sessionmaker] = None


def _connect_args(url: str) -> dict:
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


def init_db(url: Optional[str] = None) -> Engine:
    """初始化数据库句柄并创建表（重复调用不会重建 engine）"""
    global _engine, _SessionLocal

    if _engine is None:
        database_url = url or settings.DATABASE_URL
        _engine = create_engine(database_url, connect_args=_connect_args(database_url))
        _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=_engine)
        logger.info("Database engine created for %s", _engine.url.render_as_string(hide_password=True))

    from app.models import entities  # noqa
    Base.metadata.create_all(bind=_engine)
    return _engine


def close_db() -> None:
    """释放连接池并重置句柄"""
    global _engine, _SessionLocal

    if _engine is not None:
        _engine.dispose()
        logger.info("Database engine disposed")
    _engine = None
    _SessionLocal = None


def get_engine() -> Engine:
    if _engine is None:
        init_db()
    return _engine


def get_sessionmaker() -> sessionmaker:
    if _SessionLocal is None:
        init_db()
    return _SessionLocal


def get_db():
    """依赖注入：获取数据库会话"""
    db = get_sessionmaker()()
    try:
        yield db
    finally:
        db.close()
