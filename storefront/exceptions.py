"""Custom exception hierarchy for the storefront application."""


class StorefrontError(Exception):
    """Base exception for all storefront errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(StorefrontError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class UserNotFoundError(NotFoundError):
    """User not found error."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(f"There is no user under id {user_id}")


class RoleNotFoundError(NotFoundError):
    """Role not found error."""

    def __init__(self, role_name: str) -> None:
        self.role_name = role_name
        super().__init__(f"There is no role under this name {role_name}")


class ProductNotFoundError(NotFoundError):
    """Product not found error."""

    def __init__(self, product_id: str) -> None:
        self.product_id = product_id
        super().__init__(f"There is no product under id {product_id}")


class OrderNotFoundError(NotFoundError):
    """Order not found error."""

    def __init__(self, order_id: str) -> None:
        self.order_id = order_id
        super().__init__(f"There is no order under id {order_id}")


class ConflictError(StorefrontError):
    """Resource already exists."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 409 status code."""
        super().__init__(message, status_code=409)
