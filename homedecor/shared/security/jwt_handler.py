from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from homedecor.shared.config import settings

SECRET_KEY = settings.JWT_SECRET_KEY
if not SECRET_KEY:
    raise ValueError("FATAL ERROR: JWT_SECRET_KEY is not set in the environment!")

REFRESH_SECRET_KEY = settings.JWT_REFRESH_SECRET_KEY
if not REFRESH_SECRET_KEY:
    raise ValueError("FATAL ERROR: JWT_REFRESH_SECRET_KEY is not set in the environment!")

ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = settings.ACCESS_TOKEN_EXPIRE_MINUTES
REFRESH_TOKEN_EXPIRE_DAYS = settings.REFRESH_TOKEN_EXPIRE_DAYS


def _encode(data: dict, secret: str, expires_delta: timedelta) -> str:
    to_encode = data.copy()
    to_encode.update({"exp": datetime.now(timezone.utc) + expires_delta})
    return jwt.encode(to_encode, secret, algorithm=ALGORITHM)


def _decode(token: str, secret: str) -> dict | None:
    try:
        return jwt.decode(token, secret, algorithms=[ALGORITHM])
    except JWTError:
        return None


def create_access_token(data: dict, expires_delta: timedelta = None) -> str:
    """Creates a short-lived access token carrying `sub` and `role`."""
    return _encode(
        data, SECRET_KEY, expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    )


def create_refresh_token(data: dict, expires_delta: timedelta = None) -> str:
    """Creates a long-lived refresh token signed with its own secret."""
    return _encode(
        data, REFRESH_SECRET_KEY, expires_delta or timedelta(days=REFRESH_TOKEN_EXPIRE_DAYS)
    )


def verify_access_token(token: str) -> dict | None:
    """Decodes and verifies an access token. Returns payload if valid, None if invalid/expired."""
    return _decode(token, SECRET_KEY)


def verify_refresh_token(token: str) -> dict | None:
    return _decode(token, REFRESH_SECRET_KEY)
