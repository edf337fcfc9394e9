from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from homedecor.shared.config.database import get_db
from homedecor.shared.security import CurrentUser, get_current_user

from .schemas import CartItemCreate, CartItemUpdate, CartResponse
from .service import CartService

router = APIRouter(prefix="/api/cart", tags=["Cart"])


@router.get("", response_model=CartResponse)
async def get_cart(user: CurrentUser = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    return await CartService.get_cart(db, user.id)


@router.post("/items", response_model=CartResponse)
async def add_item(
    item: CartItemCreate,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await CartService.add_item(db, user.id, item)


@router.patch("/items/{product_id}", response_model=CartResponse)
async def update_item(
    product_id: int,
    payload: CartItemUpdate,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await CartService.update_item(db, user.id, product_id, payload.quantity)


@router.delete("/items/{product_id}", response_model=CartResponse)
async def remove_item(
    product_id: int,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await CartService.remove_item(db, user.id, product_id)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def clear_cart(user: CurrentUser = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    """Deletes all items in the caller's cart."""
    await CartService.clear_cart(db, user.id)
