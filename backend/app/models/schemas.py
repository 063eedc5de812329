"""
Pydantic 模式定义
用于 API 请求/响应验证，响应字段使用 camelCase
"""
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel


def to_utc_iso(value: datetime) -> str:
    """数据库中的时间为 UTC（无时区），输出带 Z 的毫秒精度 ISO 字符串"""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class CamelModel(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @field_serializer("created_at", "updated_at", check_fields=False)
    def serialize_timestamp(self, value: datetime) -> str:
        return to_utc_iso(value)


# ============== 酒店 Schemas ==============

class HotelResponse(CamelModel):
    id: int
    name: str
    image: str
    created_at: datetime
    updated_at: datetime


class RoomResponse(CamelModel):
    id: int
    name: str
    capacity: int
    hotel_id: int
    created_at: datetime
    updated_at: datetime


# ============== 认证 Schemas ==============

class SignInRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1)


class SignInUser(BaseModel):
    id: int
    email: str


class SignInResponse(BaseModel):
    user: SignInUser
    token: str


class ErrorResponse(BaseModel):
    name: str
    message: str
