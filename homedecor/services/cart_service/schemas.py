from typing import List

from pydantic import BaseModel, Field


class CartItemCreate(BaseModel):
    product_id: int
    quantity: int = Field(default=1, ge=1)


class CartItemUpdate(BaseModel):
    quantity: int = Field(ge=1)


class CartItemResponse(BaseModel):
    product_id: int
    name: str
    image: str | None = None
    price: float
    quantity: int
    total: float


class CartResponse(BaseModel):
    items: List[CartItemResponse] = []
    item_count: int = 0
    subtotal: float = 0
