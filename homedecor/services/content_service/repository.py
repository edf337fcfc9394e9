from typing import Optional, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")


class ContentRepository:
    """Reads and writes the single record of a site-content table."""

    @staticmethod
    async def get(db: AsyncSession, model: type[T]) -> Optional[T]:
        result = await db.execute(select(model).order_by(model.id).limit(1))
        return result.scalars().first()

    @staticmethod
    async def create(db: AsyncSession, model: type[T], data: dict) -> T:
        record = model(**data)
        db.add(record)
        await db.commit()
        await db.refresh(record)
        return record

    @staticmethod
    async def get_or_create(db: AsyncSession, model: type[T]) -> T:
        record = await ContentRepository.get(db, model)
        if record is None:
            record = await ContentRepository.create(db, model, {})
        return record

    @staticmethod
    async def upsert(db: AsyncSession, model: type[T], data: dict) -> T:
        record = await ContentRepository.get(db, model)
        if record is None:
            return await ContentRepository.create(db, model, data)
        for field, value in data.items():
            setattr(record, field, value)
        await db.commit()
        await db.refresh(record)
        return record
