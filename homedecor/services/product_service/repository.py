from typing import Optional

from sqlalchemy import String, cast, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Product


class ProductRepository:

    @staticmethod
    async def create_product(db: AsyncSession, product: Product):
        db.add(product)
        await db.commit()
        await db.refresh(product)
        return product

    @staticmethod
    async def search_products(
        db: AsyncSession,
        category: Optional[str] = None,
        featured: bool = False,
        new_arrivals: bool = False,
        search: Optional[str] = None,
        skip: int = 0,
        limit: int = 20,
    ) -> tuple[list[Product], int]:
        conditions = [Product.is_active.is_(True)]
        if category:
            conditions.append(Product.category == category)
        if featured:
            conditions.append(Product.is_featured.is_(True))
        if new_arrivals:
            conditions.append(Product.is_new_arrival.is_(True))
        if search:
            pattern = f"%{search.lower()}%"
            conditions.append(or_(
                func.lower(Product.name).like(pattern),
                func.lower(Product.description).like(pattern),
                # tags are a JSON list; match against its serialized form
                func.lower(cast(Product.tags, String)).like(pattern),
            ))

        result = await db.execute(
            select(Product)
            .where(*conditions)
            .order_by(Product.created_at.desc(), Product.id.desc())
            .offset(skip)
            .limit(limit)
        )
        total = await db.scalar(select(func.count(Product.id)).where(*conditions))
        return list(result.scalars().all()), total or 0

    @staticmethod
    async def get_product_by_id(db: AsyncSession, product_id: int) -> Optional[Product]:
        result = await db.execute(select(Product).where(Product.id == product_id))
        return result.scalars().first()

    @staticmethod
    async def get_products_by_ids(db: AsyncSession, product_ids: list[int]) -> dict[int, Product]:
        if not product_ids:
            return {}
        result = await db.execute(select(Product).where(Product.id.in_(product_ids)))
        return {p.id: p for p in result.scalars().all()}

    @staticmethod
    async def update_product(db: AsyncSession, product: Product):
        db.add(product)
        await db.commit()
        await db.refresh(product)
        return product

    @staticmethod
    async def delete_product(db: AsyncSession, product: Product) -> None:
        await db.delete(product)
        await db.commit()

    @staticmethod
    async def count(db: AsyncSession) -> int:
        return await db.scalar(select(func.count(Product.id))) or 0
