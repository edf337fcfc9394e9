from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from homedecor.shared.config.database import get_db
from homedecor.shared.security import require_admin

from .schemas import (
    CategoryCreate,
    CategoryEnvelope,
    CategoryListResponse,
    CategoryMutationResponse,
    CategoryUpdate,
)
from .service import CategoryService

router = APIRouter(prefix="/api/categories", tags=["Categories"])


@router.get("", response_model=CategoryListResponse)
async def list_categories(
    is_active: Optional[bool] = Query(default=None),
    include_inactive: bool = Query(default=False),
    db: AsyncSession = Depends(get_db),
):
    categories = await CategoryService.list_categories(db, is_active, include_inactive)
    return {"categories": categories}


@router.get("/{category_id}", response_model=CategoryEnvelope)
async def get_category(category_id: int, db: AsyncSession = Depends(get_db)):
    return {"category": await CategoryService.get_category(db, category_id)}


@router.post(
    "",
    response_model=CategoryMutationResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_category(payload: CategoryCreate, db: AsyncSession = Depends(get_db)):
    category = await CategoryService.create_category(db, payload)
    return {"message": "Category created successfully", "category": category}


@router.put(
    "/{category_id}",
    response_model=CategoryMutationResponse,
    dependencies=[Depends(require_admin)],
)
async def update_category(category_id: int, payload: CategoryUpdate, db: AsyncSession = Depends(get_db)):
    category = await CategoryService.update_category(db, category_id, payload)
    return {"message": "Category updated successfully", "category": category}


@router.delete("/{category_id}", dependencies=[Depends(require_admin)])
async def delete_category(category_id: int, db: AsyncSession = Depends(get_db)):
    await CategoryService.delete_category(db, category_id)
    return {"message": "Category deleted successfully"}
