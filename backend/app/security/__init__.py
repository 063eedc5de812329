# Security module
from app.security.auth import (
    get_password_hash, verify_password, create_access_token,
    decode_token, get_current_user
)

__all__ = [
    'get_password_hash', 'verify_password', 'create_access_token',
    'decode_token', 'get_current_user'
]
