"""
认证路由
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.models.schemas import SignInRequest, SignInResponse, ErrorResponse
from app.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["认证"])


@router.post("/sign-in", response_model=SignInResponse, responses={401: {"model": ErrorResponse}})
def sign_in(data: SignInRequest, db: Session = Depends(get_db)):
    """用户登录"""
    service = AuthService(db)
    return service.sign_in(data.email, data.password)
