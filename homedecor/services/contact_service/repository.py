from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import ContactMessage


class ContactMessageRepository:

    @staticmethod
    async def create(db: AsyncSession, message: ContactMessage) -> ContactMessage:
        db.add(message)
        await db.commit()
        await db.refresh(message)
        return message

    @staticmethod
    async def list_messages(db: AsyncSession) -> list[ContactMessage]:
        result = await db.execute(
            select(ContactMessage).order_by(ContactMessage.created_at.desc(), ContactMessage.id.desc())
        )
        return list(result.scalars().all())

    @staticmethod
    async def get(db: AsyncSession, message_id: int) -> Optional[ContactMessage]:
        result = await db.execute(select(ContactMessage).where(ContactMessage.id == message_id))
        return result.scalars().first()

    @staticmethod
    async def set_status(db: AsyncSession, message: ContactMessage, status: str) -> ContactMessage:
        message.status = status
        await db.commit()
        await db.refresh(message)
        return message

    @staticmethod
    async def delete(db: AsyncSession, message: ContactMessage) -> None:
        await db.delete(message)
        await db.commit()
