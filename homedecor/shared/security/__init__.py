from .jwt_handler import (
    create_access_token,
    create_refresh_token,
    verify_access_token,
    verify_refresh_token,
)
from .dependencies import CurrentUser, get_current_user, require_admin
from .passwords import hash_password, verify_password
from .rate_limiter import limiter, user_id_or_ip

__all__ = [
    "create_access_token",
    "create_refresh_token",
    "verify_access_token",
    "verify_refresh_token",
    "CurrentUser",
    "get_current_user",
    "require_admin",
    "hash_password",
    "verify_password",
    "limiter",
    "user_id_or_ip",
]
