from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from homedecor.shared.config import settings

from .jwt_handler import verify_access_token


def _bearer_subject(request: Request) -> str | None:
    scheme, _, token = request.headers.get("Authorization", "").partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    payload = verify_access_token(token)
    return payload.get("sub") if payload else None


def user_id_or_ip(request: Request) -> str:
    """Rate-limit key: signed-in callers share a bucket across devices, everyone else is keyed by address."""
    subject = _bearer_subject(request)
    if subject:
        return f"user:{subject}"
    return f"ip:{get_remote_address(request)}"


limiter = Limiter(
    key_func=user_id_or_ip,
    storage_uri=settings.RATE_LIMIT_STORAGE_URI,
    enabled=settings.RATE_LIMIT_ENABLED,
)
