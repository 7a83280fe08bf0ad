"""HTTP routers."""

from storefront.routers import orders, products, roles, users

__all__ = ["orders", "products", "roles", "users"]
