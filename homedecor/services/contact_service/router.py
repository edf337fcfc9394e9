from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from homedecor.shared.config import settings
from homedecor.shared.config.database import get_db
from homedecor.shared.security import limiter, require_admin

from .schemas import (
    ContactMessageCreate,
    ContactMessageList,
    ContactMessageMutation,
    ContactMessageStatusUpdate,
)
from .service import ContactService

public_router = APIRouter(prefix="/api/contact", tags=["Contact"])
router = APIRouter(
    prefix="/api/admin/contact/messages",
    tags=["Contact"],
    dependencies=[Depends(require_admin)],
)


@public_router.post("", status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.CONTACT_RATE_LIMIT)
async def submit_message(request: Request, payload: ContactMessageCreate, db: AsyncSession = Depends(get_db)):
    await ContactService.submit(db, payload)
    return {"message": "Message received"}


@router.get("", response_model=ContactMessageList)
async def list_messages(db: AsyncSession = Depends(get_db)):
    return {"messages": await ContactService.list_messages(db)}


@router.put("/{message_id}", response_model=ContactMessageMutation)
async def update_message(message_id: int, payload: ContactMessageStatusUpdate, db: AsyncSession = Depends(get_db)):
    message = await ContactService.update_status(db, message_id, payload.status)
    return {"message": "Message updated", "data": message}


@router.delete("/{message_id}")
async def delete_message(message_id: int, db: AsyncSession = Depends(get_db)):
    await ContactService.delete(db, message_id)
    return {"message": "Message deleted"}
