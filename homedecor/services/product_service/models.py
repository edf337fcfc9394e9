from sqlalchemy import JSON, Boolean, Column, DateTime, Float, Integer, String, Text

from homedecor.shared.config.database import Base, utcnow


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Float, nullable=False)
    category = Column(String(100), nullable=False, index=True)  # category slug
    images = Column(JSON, default=list, nullable=False)  # hosted image URLs
    colors = Column(JSON, default=list, nullable=False)
    sizes = Column(JSON, default=list, nullable=False)
    material = Column(String(255), nullable=True)
    dimensions = Column(JSON, nullable=True)  # {length, width, height}
    weight = Column(Float, nullable=True)
    # Informational only: checkout does not decrement it
    stock = Column(Integer, default=0, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    is_featured = Column(Boolean, default=False, nullable=False)
    is_new_arrival = Column(Boolean, default=False, nullable=False)
    tags = Column(JSON, default=list, nullable=False)
    rating = Column(Float, default=0, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
