"""
酒店仓储

只读查询：全部酒店、指定酒店下的房间
"""
from typing import List

from sqlalchemy.orm import Session

from app.models.entities import Hotel, Room


class HotelRepository:
    """
    Hotel 仓储

    负责 Hotel / Room 的查询，不做缓存和重试，数据库异常直接抛出
    """

    def __init__(self, db_session: Session):
        """
        初始化仓储

        Args:
            db_session: SQLAlchemy 数据库会话
        """
        self._db = db_session

    def find_hotels(self) -> List[Hotel]:
        """获取所有酒店"""
        return self._db.query(Hotel).order_by(Hotel.id).all()

    def find_rooms_by_hotel_id(self, hotel_id: int) -> List[Room]:
        """
        获取酒店下的房间

        Args:
            hotel_id: 酒店 ID

        Returns:
            房间列表，酒店不存在或没有房间时返回空列表
        """
        return (
            self._db.query(Room)
            .filter(Room.hotel_id == hotel_id)
            .order_by(Room.id)
            .all()
        )
