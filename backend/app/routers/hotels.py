"""
酒店路由
"""
from typing import List
from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session
from app.database import get_db
from app.models.schemas import HotelResponse, RoomResponse, ErrorResponse
from app.services.hotel_service import HotelService
from app.security.auth import get_current_user

# 主键为 64 位有符号整数
MAX_ID = 2**63 - 1

router = APIRouter(
    prefix="/hotels",
    tags=["酒店"],
    responses={
        401: {"model": ErrorResponse},
        402: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)


@router.get("", response_model=List[HotelResponse])
def list_hotels(
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user)
):
    """获取酒店列表"""
    service = HotelService(db)
    return service.get_hotels(user_id)


@router.get("/{hotel_id}", response_model=List[RoomResponse])
def list_hotel_rooms(
    hotel_id: int = Path(..., ge=1, le=MAX_ID),
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user)
):
    """获取酒店的房间列表"""
    service = HotelService(db)
    return service.get_hotels_with_rooms(user_id, hotel_id)
