from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, EmailStr, Field

from homedecor.services.auth_service.schemas import Role, UserResponse
from homedecor.services.order_service.schemas import OrderUserSummary
from homedecor.shared.pagination import Pagination
from homedecor.shared.validation import non_nullable


class RecentOrder(BaseModel):
    id: int
    order_number: str
    user: Optional[OrderUserSummary] = None
    total: float
    status: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class TopProduct(BaseModel):
    product_id: int
    name: str
    total_sold: int
    total_revenue: float
    image: Optional[str] = None


class MonthlyRevenue(BaseModel):
    month: str  # "YYYY-M"
    revenue: float


class DashboardStats(BaseModel):
    total_users: int
    total_products: int
    total_orders: int
    total_revenue: float
    order_status_counts: Dict[str, int]
    recent_orders: List[RecentOrder]
    top_products: List[TopProduct]
    monthly_revenue: List[MonthlyRevenue]


class UserListResponse(BaseModel):
    users: List[UserResponse]
    pagination: Pagination


class AdminUserChanges(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    phone: Optional[str] = None
    role: Optional[Role] = None
    is_active: Optional[bool] = None

    _not_null = non_nullable("name", "role", "is_active")


class AdminUserUpdate(BaseModel):
    user_id: int
    updates: AdminUserChanges


class UserEnvelope(BaseModel):
    user: UserResponse


class UserMutationResponse(BaseModel):
    message: str
    user: UserResponse


class ProfileUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    avatar: Optional[str] = None
    current_password: Optional[str] = None
    new_password: Optional[str] = Field(default=None, min_length=6)

    _not_null = non_nullable("name", "email")
