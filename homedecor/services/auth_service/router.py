from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from homedecor.shared.config import settings
from homedecor.shared.config.database import get_db
from homedecor.shared.security import CurrentUser, get_current_user, limiter

from .schemas import AuthResponse, RefreshRequest, TokenPair, UserCreate, UserLogin, UserResponse
from .service import AuthService

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user account",
)
@limiter.limit(settings.AUTH_RATE_LIMIT)
async def register(request: Request, payload: UserCreate, db: AsyncSession = Depends(get_db)):
    return await AuthService.register(db, payload)


@router.post(
    "/login",
    response_model=AuthResponse,
    summary="Authenticate and receive access and refresh tokens",
)
@limiter.limit(settings.AUTH_RATE_LIMIT)
async def login(request: Request, payload: UserLogin, db: AsyncSession = Depends(get_db)):
    return await AuthService.login(db, payload)


@router.post(
    "/refresh",
    response_model=TokenPair,
    summary="Exchange a refresh token for a new token pair",
)
@limiter.limit(settings.AUTH_RATE_LIMIT)
async def refresh(request: Request, payload: RefreshRequest, db: AsyncSession = Depends(get_db)):
    return await AuthService.refresh(db, payload.refresh_token)


@router.get(
    "/me",
    response_model=UserResponse,
    summary="Get the current authenticated user's profile",
)
async def get_me(
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await AuthService.get_user_by_id(db, user.id)
