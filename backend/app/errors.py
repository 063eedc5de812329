"""
应用错误协议

ApplicationError 是唯一的应用级异常类型，错误种类由封闭枚举 ErrorKind 标记。
路由层通过 ERROR_STATUS_CODES 将错误种类映射为 HTTP 状态码，
映射表必须覆盖全部 ErrorKind（模块导入时校验）。
"""
from enum import Enum
from typing import Dict

from fastapi import status


class ErrorKind(str, Enum):
    """错误种类"""
    NOT_FOUND = "NotFoundError"
    CANNOT_LIST_HOTELS = "CannotListHotelsError"
    UNAUTHORIZED = "UnauthorizedError"
    INVALID_CREDENTIALS = "InvalidCredentialsError"


class ApplicationError(Exception):
    """
    应用错误

    Attributes:
        name: 错误种类
        message: 可读的错误信息
    """

    def __init__(self, name: ErrorKind, message: str):
        self.name = name
        self.message = message
        super().__init__(message)

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name.value, "message": self.message}

    def __repr__(self) -> str:
        return f"ApplicationError({self.name.value}, {self.message!r})"


def not_found_error() -> ApplicationError:
    return ApplicationError(ErrorKind.NOT_FOUND, "No result for this search!")


def cannot_list_hotels_error() -> ApplicationError:
    return ApplicationError(ErrorKind.CANNOT_LIST_HOTELS, "Can not list hotels!")


def unauthorized_error() -> ApplicationError:
    return ApplicationError(ErrorKind.UNAUTHORIZED, "You must be signed in to continue")


def invalid_credentials_error() -> ApplicationError:
    return ApplicationError(ErrorKind.INVALID_CREDENTIALS, "email or password are incorrect")


ERROR_STATUS_CODES: Dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CANNOT_LIST_HOTELS: status.HTTP_402_PAYMENT_REQUIRED,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
}

_unmapped = set(ErrorKind) - set(ERROR_STATUS_CODES)
if _unmapped:
    raise RuntimeError(f"ERROR_STATUS_CODES missing kinds: {sorted(k.value for k in _unmapped)}")


__all__ = [
    "ErrorKind",
    "ApplicationError",
    "not_found_error",
    "cannot_list_hotels_error",
    "unauthorized_error",
    "invalid_credentials_error",
    "ERROR_STATUS_CODES",
]
