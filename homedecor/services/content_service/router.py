from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from homedecor.shared.config.database import get_db
from homedecor.shared.security import require_admin

from .schemas import (
    AboutEnvelope,
    AboutMutation,
    AboutPayload,
    ContactEnvelope,
    ContactInfoPayload,
    ContactMutation,
    FooterEnvelope,
    FooterMutation,
    FooterPayload,
    SettingsMutationResponse,
    SettingsResponse,
    SettingsUpdate,
)
from .service import ContentService

settings_router = APIRouter(prefix="/api/settings", tags=["Settings"])
router = APIRouter(prefix="/api/admin", tags=["Site Content"])


# --- Site settings ---

@settings_router.get("", response_model=SettingsResponse)
async def get_settings(db: AsyncSession = Depends(get_db)):
    return await ContentService.get_settings(db)


@settings_router.put("", response_model=SettingsMutationResponse, dependencies=[Depends(require_admin)])
async def update_settings(payload: SettingsUpdate, db: AsyncSession = Depends(get_db)):
    settings = await ContentService.update_settings(db, payload.model_dump(exclude_unset=True))
    return {"message": "Settings updated successfully", "settings": settings}


# --- About page ---

@router.get("/about", response_model=AboutEnvelope)
async def get_about(db: AsyncSession = Depends(get_db)):
    return {"about": await ContentService.get_about(db)}


@router.post(
    "/about",
    response_model=AboutMutation,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_about(payload: AboutPayload, db: AsyncSession = Depends(get_db)):
    about = await ContentService.create_about(db, payload.model_dump(exclude_unset=True))
    return {"message": "About created", "about": about}


@router.put("/about", response_model=AboutMutation, dependencies=[Depends(require_admin)])
async def update_about(payload: AboutPayload, db: AsyncSession = Depends(get_db)):
    about = await ContentService.update_about(db, payload.model_dump(exclude_unset=True))
    return {"message": "About updated", "about": about}


# --- Contact details ---

@router.get("/contact", response_model=ContactEnvelope)
async def get_contact_info(db: AsyncSession = Depends(get_db)):
    return {"contact": await ContentService.get_contact_info(db)}


@router.post(
    "/contact",
    response_model=ContactMutation,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_contact_info(payload: ContactInfoPayload, db: AsyncSession = Depends(get_db)):
    contact = await ContentService.create_contact_info(db, payload.model_dump(exclude_unset=True))
    return {"message": "Contact info created", "contact": contact}


@router.put("/contact", response_model=ContactMutation, dependencies=[Depends(require_admin)])
async def update_contact_info(payload: ContactInfoPayload, db: AsyncSession = Depends(get_db)):
    contact = await ContentService.update_contact_info(db, payload.model_dump(exclude_unset=True))
    return {"message": "Contact info updated", "contact": contact}


# --- Footer ---

@router.get("/footer", response_model=FooterEnvelope)
async def get_footer(db: AsyncSession = Depends(get_db)):
    return {"footer": await ContentService.get_footer(db)}


@router.put("/footer", response_model=FooterMutation, dependencies=[Depends(require_admin)])
async def update_footer(payload: FooterPayload, db: AsyncSession = Depends(get_db)):
    footer = await ContentService.update_footer(db, payload.model_dump())
    return {"message": "Footer updated", "footer": footer}
