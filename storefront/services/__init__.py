"""Service layer for business logic."""

from storefront.services.order_service import OrderService
from storefront.services.product_service import ProductService
from storefront.services.role_service import RoleService
from storefront.services.user_service import UserService

__all__ = [
    "OrderService",
    "ProductService",
    "RoleService",
    "UserService",
]
