from collections import defaultdict
from datetime import datetime, timezone

import structlog
from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from homedecor.services.auth_service.models import User
from homedecor.services.auth_service.repository import UserRepository
from homedecor.services.order_service.models import ORDER_STATUSES
from homedecor.services.order_service.repository import OrderRepository
from homedecor.services.product_service.repository import ProductRepository
from homedecor.shared.security import hash_password, verify_password

from .schemas import AdminUserChanges, DashboardStats, MonthlyRevenue, ProfileUpdate, RecentOrder, TopProduct

logger = structlog.get_logger(__name__)

REVENUE_MONTHS = 6


def month_start(now: datetime, months_back: int) -> datetime:
    """First instant of the calendar month `months_back` months before `now`'s month."""
    years, month_index = divmod(now.year * 12 + now.month - 1 - months_back, 12)
    return datetime(years, month_index + 1, 1, tzinfo=timezone.utc)


def bucket_monthly_revenue(rows, months: list[tuple[int, int]]) -> list[MonthlyRevenue]:
    totals: dict[tuple[int, int], float] = defaultdict(float)
    for created_at, total in rows:
        totals[(created_at.year, created_at.month)] += total
    return [
        MonthlyRevenue(month=f"{year}-{month}", revenue=round(totals[(year, month)], 2))
        for year, month in months
    ]


class AdminService:

    @staticmethod
    async def dashboard(db: AsyncSession, now: datetime | None = None) -> DashboardStats:
        now = now or datetime.now(timezone.utc)

        counts = await OrderRepository.status_counts(db)
        status_counts = {s: counts.get(s, 0) for s in ORDER_STATUSES}

        top_rows = await OrderRepository.top_products(db, limit=5)
        products = await ProductRepository.get_products_by_ids(db, [row[0] for row in top_rows])
        top_products = []
        for product_id, name, total_sold, total_revenue in top_rows:
            product = products.get(product_id)
            top_products.append(TopProduct(
                product_id=product_id,
                name=product.name if product else name,
                total_sold=int(total_sold or 0),
                total_revenue=round(float(total_revenue or 0), 2),
                image=(product.images or [None])[0] if product else None,
            ))

        # The current month plus the five before it
        months = [month_start(now, back) for back in range(REVENUE_MONTHS - 1, -1, -1)]
        rows = await OrderRepository.revenue_rows_since(db, months[0])
        monthly = bucket_monthly_revenue(rows, [(m.year, m.month) for m in months])
        recent = await OrderRepository.list_orders(db, limit=10)

        return DashboardStats(
            total_users=await UserRepository.count(db),
            total_products=await ProductRepository.count(db),
            total_orders=sum(counts.values()),
            total_revenue=round(await OrderRepository.revenue(db), 2),
            order_status_counts=status_counts,
            recent_orders=[RecentOrder.model_validate(order) for order in recent],
            top_products=top_products,
            monthly_revenue=monthly,
        )

    @staticmethod
    async def list_users(db: AsyncSession, role: str | None, skip: int, limit: int):
        return await UserRepository.list_users(db, role, skip, limit)

    @staticmethod
    async def update_user(db: AsyncSession, user_id: int, changes: AdminUserChanges) -> User:
        user = await UserRepository.get_by_id(db, user_id)
        if not user:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        for field, value in changes.model_dump(exclude_unset=True).items():
            setattr(user, field, value)
        user = await UserRepository.update(db, user)
        logger.info("user_updated_by_admin", user_id=user.id, role=user.role, is_active=user.is_active)
        return user

    @staticmethod
    async def get_profile(db: AsyncSession, user_id: int) -> User:
        user = await UserRepository.get_by_id(db, user_id)
        if not user:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        return user

    @staticmethod
    async def update_profile(db: AsyncSession, user_id: int, data: ProfileUpdate) -> User:
        user = await AdminService.get_profile(db, user_id)
        changes = data.model_dump(exclude_unset=True)
        current_password = changes.pop("current_password", None)
        new_password = changes.pop("new_password", None)

        email = changes.get("email")
        if email and email != user.email:
            existing = await UserRepository.get_by_email(db, email)
            if existing and existing.id != user.id:
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already exists")

        if new_password:
            if not current_password or not verify_password(current_password, user.hashed_password):
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="Current password is incorrect",
                )
            user.hashed_password = hash_password(new_password)

        for field, value in changes.items():
            setattr(user, field, value)
        return await UserRepository.update(db, user)
