from datetime import datetime
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Order, OrderItem


class OrderRepository:

    @staticmethod
    async def get_order(db: AsyncSession, order_id: int) -> Optional[Order]:
        # populate_existing so relationships are re-read after a write in the same session
        result = await db.execute(
            select(Order)
            .where(Order.id == order_id)
            .execution_options(populate_existing=True)
        )
        return result.scalars().first()

    @staticmethod
    async def count_orders(db: AsyncSession, user_id: Optional[int] = None, status: Optional[str] = None) -> int:
        query = select(func.count(Order.id))
        if user_id is not None:
            query = query.where(Order.user_id == user_id)
        if status:
            query = query.where(Order.status == status)
        return await db.scalar(query) or 0

    @staticmethod
    async def list_orders(
        db: AsyncSession,
        user_id: Optional[int] = None,
        status: Optional[str] = None,
        skip: int = 0,
        limit: int = 10,
    ) -> list[Order]:
        query = select(Order)
        if user_id is not None:
            query = query.where(Order.user_id == user_id)
        if status:
            query = query.where(Order.status == status)
        result = await db.execute(
            query.order_by(Order.created_at.desc(), Order.id.desc()).offset(skip).limit(limit)
        )
        return list(result.scalars().all())

    @staticmethod
    async def delete_order(db: AsyncSession, order: Order) -> None:
        await db.delete(order)
        await db.commit()

    # --- Aggregates for the admin dashboard ---

    @staticmethod
    async def revenue(db: AsyncSession) -> float:
        total = await db.scalar(
            select(func.coalesce(func.sum(Order.total), 0)).where(Order.status != "cancelled")
        )
        return float(total or 0)

    @staticmethod
    async def status_counts(db: AsyncSession) -> dict[str, int]:
        result = await db.execute(select(Order.status, func.count(Order.id)).group_by(Order.status))
        return {status: count for status, count in result.all()}

    @staticmethod
    async def top_products(db: AsyncSession, limit: int = 5) -> list[tuple]:
        """(product_id, name, total_sold, total_revenue) ordered by quantity sold."""
        total_sold = func.sum(OrderItem.quantity).label("total_sold")
        result = await db.execute(
            select(
                OrderItem.product_id,
                func.max(OrderItem.product_name),
                total_sold,
                func.sum(OrderItem.total),
            )
            .where(OrderItem.product_id.is_not(None))
            .group_by(OrderItem.product_id)
            .order_by(total_sold.desc())
            .limit(limit)
        )
        return list(result.all())

    @staticmethod
    async def revenue_rows_since(db: AsyncSession, since: datetime) -> list[tuple]:
        """(created_at, total) of non-cancelled orders placed on or after `since`."""
        result = await db.execute(
            select(Order.created_at, Order.total)
            .where(Order.created_at >= since, Order.status != "cancelled")
            .order_by(Order.created_at)
        )
        return list(result.all())
