from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from .models import AboutContent, ContactInfo, FooterContent, SiteSettings
from .repository import ContentRepository


class ContentService:

    @staticmethod
    async def get_settings(db: AsyncSession) -> SiteSettings:
        return await ContentRepository.get_or_create(db, SiteSettings)

    @staticmethod
    async def update_settings(db: AsyncSession, changes: dict) -> SiteSettings:
        return await ContentRepository.upsert(db, SiteSettings, changes)

    @staticmethod
    async def get_footer(db: AsyncSession) -> FooterContent:
        return await ContentRepository.get_or_create(db, FooterContent)

    @staticmethod
    async def update_footer(db: AsyncSession, data: dict) -> FooterContent:
        return await ContentRepository.upsert(db, FooterContent, data)

    @staticmethod
    async def get_about(db: AsyncSession) -> AboutContent | None:
        return await ContentRepository.get(db, AboutContent)

    @staticmethod
    async def create_about(db: AsyncSession, data: dict) -> AboutContent:
        if await ContentRepository.get(db, AboutContent):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="About already exists")
        return await ContentRepository.create(db, AboutContent, data)

    @staticmethod
    async def update_about(db: AsyncSession, data: dict) -> AboutContent:
        return await ContentRepository.upsert(db, AboutContent, data)

    @staticmethod
    async def get_contact_info(db: AsyncSession) -> ContactInfo | None:
        return await ContentRepository.get(db, ContactInfo)

    @staticmethod
    async def create_contact_info(db: AsyncSession, data: dict) -> ContactInfo:
        if await ContentRepository.get(db, ContactInfo):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Contact info already exists"
            )
        return await ContentRepository.create(db, ContactInfo, data)

    @staticmethod
    async def update_contact_info(db: AsyncSession, data: dict) -> ContactInfo:
        return await ContentRepository.upsert(db, ContactInfo, data)
