from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Category


class CategoryRepository:

    @staticmethod
    async def save(db: AsyncSession, category: Category) -> Category:
        db.add(category)
        await db.commit()
        # Re-select so the parent relationship is loaded for the response
        return await CategoryRepository.get_by_id(db, category.id)

    @staticmethod
    async def get_by_id(db: AsyncSession, category_id: int) -> Optional[Category]:
        result = await db.execute(
            select(Category)
            .where(Category.id == category_id)
            .execution_options(populate_existing=True)
        )
        return result.scalars().first()

    @staticmethod
    async def get_by_name(db: AsyncSession, name: str) -> Optional[Category]:
        result = await db.execute(select(Category).where(Category.name == name))
        return result.scalars().first()

    @staticmethod
    async def get_by_slug(db: AsyncSession, slug: str) -> Optional[Category]:
        result = await db.execute(select(Category).where(Category.slug == slug))
        return result.scalars().first()

    @staticmethod
    async def list_categories(db: AsyncSession, is_active: Optional[bool]) -> list[Category]:
        query = select(Category)
        if is_active is not None:
            query = query.where(Category.is_active.is_(is_active))
        result = await db.execute(query.order_by(Category.sort_order, Category.name))
        return list(result.scalars().all())

    @staticmethod
    async def count_children(db: AsyncSession, category_id: int) -> int:
        return await db.scalar(
            select(func.count(Category.id)).where(Category.parent_category_id == category_id)
        ) or 0

    @staticmethod
    async def delete(db: AsyncSession, category: Category) -> None:
        await db.delete(category)
        await db.commit()
