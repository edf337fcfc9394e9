"""Single-row site content: each table holds at most one record."""
from sqlalchemy import JSON, Boolean, Column, DateTime, Integer, String, Text

from homedecor.shared.config.database import Base, utcnow

DEFAULT_QUICK_LINKS = [
    {"title": "Products", "url": "/products"},
    {"title": "Categories", "url": "/categories"},
    {"title": "About Us", "url": "/about"},
    {"title": "Contact", "url": "/contact"},
    {"title": "FAQ", "url": "/faq"},
]

DEFAULT_CUSTOMER_SERVICE_LINKS = [
    {"title": "Shipping Info", "url": "/shipping"},
    {"title": "Returns & Exchanges", "url": "/returns"},
    {"title": "Warranty", "url": "/warranty"},
    {"title": "Support", "url": "/support"},
    {"title": "Size Guide", "url": "/size-guide"},
]


class SiteSettings(Base):
    __tablename__ = "site_settings"

    id = Column(Integer, primary_key=True)
    site_name = Column(String(255), default="Home Decor", nullable=False)
    site_description = Column(Text, default="Beautiful home decoration items", nullable=False)
    logo = Column(String(500), default="", nullable=False)
    hero_title = Column(String(255), default="Transform Your Home", nullable=False)
    hero_subtitle = Column(Text, default="Discover beautiful decor items for every room", nullable=False)
    hero_image = Column(String(500), default="", nullable=False)
    show_featured_products = Column(Boolean, default=True, nullable=False)
    show_categories = Column(Boolean, default=True, nullable=False)
    show_testimonials = Column(Boolean, default=True, nullable=False)
    show_newsletter = Column(Boolean, default=True, nullable=False)
    contact_email = Column(String(255), default="contact@homedecor.com", nullable=False)
    contact_phone = Column(String(50), default="+1 (555) 123-4567", nullable=False)
    social_media = Column(JSON, default=dict, nullable=False)  # facebook, instagram, twitter, pinterest
    footer_text = Column(String(255), default="© 2024 Home Decor. All rights reserved.", nullable=False)
    maintenance_mode = Column(Boolean, default=False, nullable=False)
    maintenance_message = Column(
        Text,
        default="We are currently under maintenance. Please check back soon.",
        nullable=False,
    )
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)


class AboutContent(Base):
    __tablename__ = "about_content"

    id = Column(Integer, primary_key=True)
    company_name = Column(String(255))
    tagline = Column(String(255))
    description = Column(Text)
    mission = Column(Text)
    vision = Column(Text)
    address = Column(String(500))
    phone = Column(String(50))
    email = Column(String(255))
    website = Column(String(500))
    facebook = Column(String(500))
    twitter = Column(String(500))
    instagram = Column(String(500))
    linkedin = Column(String(500))
    founded_year = Column(Integer)
    team_size = Column(Integer)
    customers_served = Column(Integer)
    logo = Column(String(500))
    hero_image = Column(String(500))
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)


class ContactInfo(Base):
    __tablename__ = "contact_info"

    id = Column(Integer, primary_key=True)
    address = Column(String(500))
    phone = Column(String(50))
    email = Column(String(255))
    website = Column(String(500))
    facebook = Column(String(500))
    twitter = Column(String(500))
    instagram = Column(String(500))
    linkedin = Column(String(500))
    business_hours = Column(Text)
    map_embed = Column(Text)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)


class FooterContent(Base):
    __tablename__ = "footer_content"

    id = Column(Integer, primary_key=True)
    company_name = Column(String(255), default="Home Decor", nullable=False)
    tagline = Column(String(255), default="Beautiful Home Decoration Items", nullable=False)
    description = Column(
        Text,
        default="Transform your space with our curated collection of furniture, lighting, and accessories.",
        nullable=False,
    )
    address = Column(String(500), default="123 Decor Street, Design City, DC 12345", nullable=False)
    phone = Column(String(50), default="+1 (555) 123-4567", nullable=False)
    email = Column(String(255), default="info@homedecor.com", nullable=False)
    facebook = Column(String(500), default="", nullable=False)
    instagram = Column(String(500), default="", nullable=False)
    twitter = Column(String(500), default="", nullable=False)
    copyright = Column(String(255), default="© 2024 Home Decor. All rights reserved.", nullable=False)
    quick_links = Column(JSON, default=lambda: list(DEFAULT_QUICK_LINKS), nullable=False)
    customer_service = Column(JSON, default=lambda: list(DEFAULT_CUSTOMER_SERVICE_LINKS), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
