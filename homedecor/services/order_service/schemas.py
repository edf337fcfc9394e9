from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from homedecor.shared.pagination import Pagination
from homedecor.shared.validation import non_nullable

OrderStatus = Literal["pending", "confirmed", "processing", "shipped", "delivered", "cancelled"]
PaymentStatus = Literal["pending", "paid", "failed", "refunded"]
PaymentMethod = Literal["cod", "card", "paypal"]


class Address(BaseModel):
    name: str = Field(min_length=1)
    address: str = Field(min_length=1)
    city: str = Field(min_length=1)
    state: str = ""
    zip_code: str = ""
    country: str = Field(min_length=1)
    phone: str = ""


class OrderItemCreate(BaseModel):
    product_id: int
    quantity: int = Field(ge=1)
    price: float = Field(ge=0)


class OrderCreate(BaseModel):
    items: List[OrderItemCreate] = Field(min_length=1)
    shipping: float = Field(default=0, ge=0)
    payment_method: PaymentMethod = "cod"
    shipping_address: Address
    billing_address: Optional[Address] = None  # defaults to shipping_address
    notes: Optional[str] = None


class OrderUpdate(BaseModel):
    status: Optional[OrderStatus] = None
    payment_status: Optional[PaymentStatus] = None
    tracking_number: Optional[str] = None
    estimated_delivery: Optional[datetime] = None
    notes: Optional[str] = None
    cancelled_reason: Optional[str] = None

    _not_null = non_nullable("status", "payment_status")


class OrderUserSummary(BaseModel):
    id: int
    name: str
    email: str
    phone: Optional[str] = None

    class Config:
        from_attributes = True


class OrderProductSummary(BaseModel):
    id: int
    name: str
    images: List[str] = []
    price: float
    description: str

    class Config:
        from_attributes = True


class OrderItemResponse(BaseModel):
    product_id: Optional[int] = None
    product_name: str
    product: Optional[OrderProductSummary] = None
    quantity: int
    price: float
    total: float

    class Config:
        from_attributes = True


class OrderResponse(BaseModel):
    id: int
    order_number: str
    user: Optional[OrderUserSummary] = None
    items: List[OrderItemResponse]
    subtotal: float
    tax: float
    shipping: float
    total: float
    status: str
    payment_status: str
    payment_method: str
    shipping_address: Address
    billing_address: Optional[Address] = None
    notes: Optional[str] = None
    tracking_number: Optional[str] = None
    estimated_delivery: Optional[datetime] = None
    delivered_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None
    cancelled_by: Optional[OrderUserSummary] = None
    cancelled_reason: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class OrderMutationResponse(BaseModel):
    message: str
    order: OrderResponse


class OrderListResponse(BaseModel):
    orders: List[OrderResponse]
    pagination: Pagination
