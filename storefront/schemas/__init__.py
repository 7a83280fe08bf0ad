"""API schemas."""

from storefront.schemas.order_schemas import OrderCreateRequest, OrderResponse
from storefront.schemas.product_schemas import (
    ProductCreateRequest,
    ProductResponse,
    ProductUpdateRequest,
)
from storefront.schemas.role_schemas import RoleCreateRequest, RoleResponse
from storefront.schemas.user_schemas import UserCreateRequest, UserResponse, UserUpdateRequest

__all__ = [
    "OrderCreateRequest",
    "OrderResponse",
    "ProductCreateRequest",
    "ProductResponse",
    "ProductUpdateRequest",
    "RoleCreateRequest",
    "RoleResponse",
    "UserCreateRequest",
    "UserResponse",
    "UserUpdateRequest",
]
