from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from homedecor.shared.validation import non_nullable


class CategoryCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    slug: Optional[str] = Field(default=None, max_length=255)
    description: str = ""
    image: str = ""
    is_active: bool = True
    sort_order: int = 0
    parent_category_id: Optional[int] = None
    meta_title: str = ""
    meta_description: str = ""


class CategoryUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    image: Optional[str] = None
    is_active: Optional[bool] = None
    sort_order: Optional[int] = None
    parent_category_id: Optional[int] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None

    # null parent_category_id moves the category to the top level
    _not_null = non_nullable(
        "name", "description", "image", "is_active", "sort_order", "meta_title", "meta_description",
    )


class CategoryParent(BaseModel):
    id: int
    name: str
    slug: str

    class Config:
        from_attributes = True


class CategoryResponse(BaseModel):
    id: int
    name: str
    slug: str
    description: str
    image: str
    is_active: bool
    sort_order: int
    parent_category: Optional[CategoryParent] = None
    meta_title: str
    meta_description: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class CategoryEnvelope(BaseModel):
    category: CategoryResponse


class CategoryListResponse(BaseModel):
    categories: List[CategoryResponse]


class CategoryMutationResponse(BaseModel):
    message: str
    category: CategoryResponse
