from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from homedecor.shared.config.database import get_db
from homedecor.shared.pagination import PageParams
from homedecor.shared.security import CurrentUser, get_current_user, require_admin

from .schemas import (
    OrderCreate,
    OrderListResponse,
    OrderMutationResponse,
    OrderResponse,
    OrderStatus,
    OrderUpdate,
)
from .service import OrderService

router = APIRouter(prefix="/api/orders", tags=["Orders"])


@router.post("", response_model=OrderMutationResponse, status_code=status.HTTP_201_CREATED)
async def create_order(
    payload: OrderCreate,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    order = await OrderService.create_order(db, user, payload)
    return {"message": "Order created successfully", "order": order}


@router.get("", response_model=OrderListResponse)
async def list_orders(
    status_filter: Optional[OrderStatus] = Query(default=None, alias="status"),
    paging: PageParams = Depends(),
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    orders, total = await OrderService.list_orders(db, user, status_filter, paging.skip, paging.limit)
    return {"orders": orders, "pagination": paging.meta(total)}


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: int,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await OrderService.get_order_for(db, user, order_id)


@router.put("/{order_id}", response_model=OrderMutationResponse)
async def update_order(
    order_id: int,
    payload: OrderUpdate,
    admin: CurrentUser = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    order = await OrderService.update_order(db, admin, order_id, payload)
    return {"message": "Order updated successfully", "order": order}


@router.delete("/{order_id}", dependencies=[Depends(require_admin)])
async def delete_order(order_id: int, db: AsyncSession = Depends(get_db)):
    await OrderService.delete_order(db, order_id)
    return {"message": "Order deleted successfully"}


@router.get(
    "/{order_id}/invoice",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}},
)
async def download_invoice(
    order_id: int,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    filename, pdf = await OrderService.render_invoice(db, user, order_id)
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
