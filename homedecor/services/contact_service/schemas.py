from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, EmailStr, Field

MessageStatus = Literal["unread", "read", "replied"]


class ContactMessageCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    subject: str = Field(min_length=1, max_length=255)
    message: str = Field(min_length=1)


class ContactMessageStatusUpdate(BaseModel):
    status: MessageStatus


class ContactMessageResponse(BaseModel):
    id: int
    name: str
    email: str
    subject: str
    message: str
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ContactMessageList(BaseModel):
    messages: List[ContactMessageResponse]


class ContactMessageMutation(BaseModel):
    message: str
    data: ContactMessageResponse
