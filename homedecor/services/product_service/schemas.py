from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from homedecor.shared.pagination import Pagination
from homedecor.shared.validation import non_nullable


class Dimensions(BaseModel):
    length: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None


class ProductBase(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    price: float = Field(ge=0)
    category: str = Field(min_length=1, max_length=100)
    images: List[str] = Field(default_factory=list)
    colors: List[str] = Field(default_factory=list)
    sizes: List[str] = Field(default_factory=list)
    material: Optional[str] = None
    dimensions: Optional[Dimensions] = None
    weight: Optional[float] = Field(default=None, ge=0)
    stock: int = Field(default=0, ge=0)
    is_active: bool = True
    is_featured: bool = False
    is_new_arrival: bool = False
    tags: List[str] = Field(default_factory=list)


class ProductCreate(ProductBase):
    pass


class ProductUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, min_length=1)
    price: Optional[float] = Field(default=None, ge=0)
    category: Optional[str] = Field(default=None, min_length=1, max_length=100)
    images: Optional[List[str]] = None
    colors: Optional[List[str]] = None
    sizes: Optional[List[str]] = None
    material: Optional[str] = None
    dimensions: Optional[Dimensions] = None
    weight: Optional[float] = Field(default=None, ge=0)
    stock: Optional[int] = Field(default=None, ge=0)
    is_active: Optional[bool] = None
    is_featured: Optional[bool] = None
    is_new_arrival: Optional[bool] = None
    tags: Optional[List[str]] = None

    # material, dimensions and weight may be cleared
    _not_null = non_nullable(
        "name", "description", "price", "category", "images", "colors", "sizes",
        "stock", "is_active", "is_featured", "is_new_arrival", "tags",
    )


class ProductResponse(ProductBase):
    id: int
    rating: float = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ProductListResponse(BaseModel):
    products: List[ProductResponse]
    pagination: Pagination


class ProductUpdateResponse(BaseModel):
    message: str
    product: ProductResponse
