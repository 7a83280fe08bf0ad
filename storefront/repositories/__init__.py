"""Repository layer for database operations using repository pattern."""

from storefront.repositories.base_repository import IdFactory, Repository, new_id

__all__ = [
    "IdFactory",
    "Repository",
    "new_id",
]
