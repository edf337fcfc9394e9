from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field

from homedecor.shared.validation import non_nullable


class SocialMedia(BaseModel):
    facebook: Optional[str] = None
    instagram: Optional[str] = None
    twitter: Optional[str] = None
    pinterest: Optional[str] = None


class SettingsUpdate(BaseModel):
    site_name: Optional[str] = None
    site_description: Optional[str] = None
    logo: Optional[str] = None
    hero_title: Optional[str] = None
    hero_subtitle: Optional[str] = None
    hero_image: Optional[str] = None
    show_featured_products: Optional[bool] = None
    show_categories: Optional[bool] = None
    show_testimonials: Optional[bool] = None
    show_newsletter: Optional[bool] = None
    contact_email: Optional[EmailStr] = None
    contact_phone: Optional[str] = None
    social_media: Optional[SocialMedia] = None
    footer_text: Optional[str] = None
    maintenance_mode: Optional[bool] = None
    maintenance_message: Optional[str] = None

    # every settings column is NOT NULL
    _not_null = non_nullable("*")


class SettingsResponse(BaseModel):
    site_name: str
    site_description: str
    logo: str
    hero_title: str
    hero_subtitle: str
    hero_image: str
    show_featured_products: bool
    show_categories: bool
    show_testimonials: bool
    show_newsletter: bool
    contact_email: str
    contact_phone: str
    social_media: SocialMedia
    footer_text: str
    maintenance_mode: bool
    maintenance_message: str
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class SettingsMutationResponse(BaseModel):
    message: str
    settings: SettingsResponse


class AboutPayload(BaseModel):
    company_name: Optional[str] = None
    tagline: Optional[str] = None
    description: Optional[str] = None
    mission: Optional[str] = None
    vision: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    facebook: Optional[str] = None
    twitter: Optional[str] = None
    instagram: Optional[str] = None
    linkedin: Optional[str] = None
    founded_year: Optional[int] = None
    team_size: Optional[int] = Field(default=None, ge=0)
    customers_served: Optional[int] = Field(default=None, ge=0)
    logo: Optional[str] = None
    hero_image: Optional[str] = None


class AboutResponse(AboutPayload):
    id: int
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ContactInfoPayload(BaseModel):
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    facebook: Optional[str] = None
    twitter: Optional[str] = None
    instagram: Optional[str] = None
    linkedin: Optional[str] = None
    business_hours: Optional[str] = None
    map_embed: Optional[str] = None


class ContactInfoResponse(ContactInfoPayload):
    id: int
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class FooterLink(BaseModel):
    title: str = Field(min_length=1)
    url: str = Field(min_length=1)


class FooterPayload(BaseModel):
    company_name: str = Field(min_length=1)
    tagline: str = Field(min_length=1)
    description: str = Field(min_length=1)
    address: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    email: EmailStr
    facebook: str = ""
    instagram: str = ""
    twitter: str = ""
    copyright: str = Field(min_length=1)
    quick_links: List[FooterLink] = []
    customer_service: List[FooterLink] = []


class FooterResponse(FooterPayload):
    email: str

    class Config:
        from_attributes = True


class AboutEnvelope(BaseModel):
    about: Optional[AboutResponse] = None


class AboutMutation(BaseModel):
    message: str
    about: AboutResponse


class ContactEnvelope(BaseModel):
    contact: Optional[ContactInfoResponse] = None


class ContactMutation(BaseModel):
    message: str
    contact: ContactInfoResponse


class FooterEnvelope(BaseModel):
    footer: FooterResponse


class FooterMutation(BaseModel):
    message: str
    footer: FooterResponse
