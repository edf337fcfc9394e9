import structlog
from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from homedecor.shared.notifications import send_welcome_email
from homedecor.shared.observability import ecomm_notification_failures_total
from homedecor.shared.security import (
    create_access_token,
    create_refresh_token,
    hash_password,
    verify_password,
    verify_refresh_token,
)

from .models import User
from .repository import UserRepository
from .schemas import AuthResponse, TokenPair, UserCreate, UserLogin, UserResponse

logger = structlog.get_logger(__name__)


def issue_tokens(user: User) -> TokenPair:
    return TokenPair(
        access_token=create_access_token({"sub": str(user.id), "role": user.role}),
        refresh_token=create_refresh_token({"sub": str(user.id)}),
    )


class AuthService:

    @staticmethod
    async def register(db: AsyncSession, data: UserCreate) -> AuthResponse:
        existing = await UserRepository.get_by_email(db, data.email)
        if existing:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Email already registered",
            )
        user = await UserRepository.create(
            db,
            User(
                name=data.name,
                email=data.email,
                hashed_password=hash_password(data.password),
                role="user",
            ),
        )
        logger.info("user_registered", user_id=user.id)

        try:
            await send_welcome_email(user.email, user.name)
        except Exception as e:
            ecomm_notification_failures_total.labels(kind="welcome").inc()
            logger.error("welcome_email_failed", user_id=user.id, error=str(e))

        tokens = issue_tokens(user)
        return AuthResponse(user=UserResponse.model_validate(user), **tokens.model_dump())

    @staticmethod
    async def login(db: AsyncSession, data: UserLogin) -> AuthResponse:
        user = await UserRepository.get_by_email(db, data.email)
        if not user or not verify_password(data.password, user.hashed_password):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Incorrect email or password",
                headers={"WWW-Authenticate": "Bearer"},
            )
        if not user.is_active:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Account is disabled",
            )
        tokens = issue_tokens(user)
        return AuthResponse(user=UserResponse.model_validate(user), **tokens.model_dump())

    @staticmethod
    async def refresh(db: AsyncSession, refresh_token: str) -> TokenPair:
        payload = verify_refresh_token(refresh_token)
        if payload is None or "sub" not in payload:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid refresh token",
                headers={"WWW-Authenticate": "Bearer"},
            )
        try:
            user_id = int(payload["sub"])
        except ValueError:
            user_id = None
        user = await UserRepository.get_by_id(db, user_id) if user_id is not None else None
        if not user or not user.is_active:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="User not found or inactive",
                headers={"WWW-Authenticate": "Bearer"},
            )
        # Role is re-read from storage so promotions take effect on refresh
        return issue_tokens(user)

    @staticmethod
    async def get_user_by_id(db: AsyncSession, user_id: int) -> User:
        user = await UserRepository.get_by_id(db, user_id)
        if not user:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        return user

    @staticmethod
    async def ensure_admin(db: AsyncSession, email: str, password: str, name: str) -> User:
        """Creates the bootstrap admin account, or promotes an existing account with that email."""
        user = await UserRepository.get_by_email(db, email)
        if user is None:
            user = User(name=name, email=email, hashed_password=hash_password(password), role="admin")
            user = await UserRepository.create(db, user)
            logger.info("admin_bootstrapped", user_id=user.id)
        elif user.role != "admin":
            user.role = "admin"
            user = await UserRepository.update(db, user)
            logger.info("admin_promoted", user_id=user.id)
        return user
