import structlog
from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from .models import ContactMessage
from .repository import ContactMessageRepository
from .schemas import ContactMessageCreate

logger = structlog.get_logger(__name__)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Message not found")


class ContactService:

    @staticmethod
    async def submit(db: AsyncSession, data: ContactMessageCreate) -> ContactMessage:
        message = await ContactMessageRepository.create(db, ContactMessage(**data.model_dump()))
        logger.info("contact_message_received", message_id=message.id, subject=message.subject)
        return message

    @staticmethod
    async def list_messages(db: AsyncSession) -> list[ContactMessage]:
        return await ContactMessageRepository.list_messages(db)

    @staticmethod
    async def update_status(db: AsyncSession, message_id: int, new_status: str) -> ContactMessage:
        message = await ContactMessageRepository.get(db, message_id)
        if not message:
            raise _not_found()
        return await ContactMessageRepository.set_status(db, message, new_status)

    @staticmethod
    async def delete(db: AsyncSession, message_id: int) -> None:
        message = await ContactMessageRepository.get(db, message_id)
        if not message:
            raise _not_found()
        await ContactMessageRepository.delete(db, message)
