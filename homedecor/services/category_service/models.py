import re

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from homedecor.shared.config.database import Base, utcnow


def slugify(name: str) -> str:
    """'Wall  Décor & Art' -> 'wall-dcor-art'."""
    slug = re.sub(r"[^a-z0-9\s-]", "", name.lower().strip())
    slug = re.sub(r"\s+", "-", slug)
    return re.sub(r"-+", "-", slug)


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), unique=True, nullable=False)
    slug = Column(String(255), unique=True, nullable=False, index=True)
    description = Column(Text, default="", nullable=False)
    image = Column(String(500), default="", nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    sort_order = Column(Integer, default=0, nullable=False)
    parent_category_id = Column(Integer, ForeignKey("categories.id"), nullable=True, index=True)
    meta_title = Column(String(255), default="", nullable=False)
    meta_description = Column(Text, default="", nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    parent_category = relationship("Category", remote_side=[id], lazy="selectin", join_depth=1)
