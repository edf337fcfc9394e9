from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from homedecor.services.auth_service.schemas import Role
from homedecor.shared.config.database import get_db
from homedecor.shared.pagination import PageParams
from homedecor.shared.security import CurrentUser, require_admin

from .schemas import (
    AdminUserUpdate,
    DashboardStats,
    ProfileUpdate,
    UserEnvelope,
    UserListResponse,
    UserMutationResponse,
)
from .service import AdminService

router = APIRouter(prefix="/api/admin", tags=["Admin"], dependencies=[Depends(require_admin)])


@router.get("/dashboard", response_model=DashboardStats)
async def dashboard(db: AsyncSession = Depends(get_db)):
    return await AdminService.dashboard(db)


@router.get("/users", response_model=UserListResponse)
async def list_users(
    role: Optional[Role] = Query(default=None),
    paging: PageParams = Depends(),
    db: AsyncSession = Depends(get_db),
):
    users, total = await AdminService.list_users(db, role, paging.skip, paging.limit)
    return {"users": users, "pagination": paging.meta(total)}


@router.put("/users", response_model=UserMutationResponse)
async def update_user(payload: AdminUserUpdate, db: AsyncSession = Depends(get_db)):
    user = await AdminService.update_user(db, payload.user_id, payload.updates)
    return {"message": "User updated successfully", "user": user}


@router.get("/profile", response_model=UserEnvelope)
async def get_profile(admin: CurrentUser = Depends(require_admin), db: AsyncSession = Depends(get_db)):
    return {"user": await AdminService.get_profile(db, admin.id)}


@router.put("/profile", response_model=UserMutationResponse)
async def update_profile(
    payload: ProfileUpdate,
    admin: CurrentUser = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    user = await AdminService.update_profile(db, admin.id, payload)
    return {"message": "Profile updated successfully", "user": user}
