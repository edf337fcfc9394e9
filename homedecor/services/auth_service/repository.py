from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import User


class UserRepository:

    @staticmethod
    async def create(db: AsyncSession, user: User) -> User:
        db.add(user)
        await db.commit()
        await db.refresh(user)
        return user

    @staticmethod
    async def update(db: AsyncSession, user: User) -> User:
        await db.commit()
        await db.refresh(user)
        return user

    @staticmethod
    async def get_by_id(db: AsyncSession, user_id: int) -> Optional[User]:
        result = await db.execute(select(User).where(User.id == user_id))
        return result.scalars().first()

    @staticmethod
    async def get_by_email(db: AsyncSession, email: str) -> Optional[User]:
        result = await db.execute(select(User).where(User.email == email))
        return result.scalars().first()

    @staticmethod
    async def list_users(db: AsyncSession, role: Optional[str], skip: int, limit: int) -> tuple[list[User], int]:
        query = select(User)
        count_query = select(func.count(User.id))
        if role:
            query = query.where(User.role == role)
            count_query = count_query.where(User.role == role)

        result = await db.execute(
            query.order_by(User.created_at.desc(), User.id.desc()).offset(skip).limit(limit)
        )
        total = await db.scalar(count_query)
        return list(result.scalars().all()), total or 0

    @staticmethod
    async def count(db: AsyncSession) -> int:
        return await db.scalar(select(func.count(User.id))) or 0
