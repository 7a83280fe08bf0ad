"""FastAPI dependencies for the application."""

from collections.abc import Awaitable, Callable
from typing import Annotated, TypeVar

from dependency_injector.providers import Provider
from fastapi import Depends

from storefront.core import container
from storefront.database import DatabaseSession
from storefront.services import OrderService, ProductService, RoleService, UserService

T = TypeVar("T")


def inject_service(provider: Provider[T]) -> Callable[[DatabaseSession], Awaitable[T]]:
    """
    Create a FastAPI dependency for a container provider.

    The container's ``db`` is overridden with the request-scoped session only
    while the provider builds the service graph.
    """

    async def dependency(db: DatabaseSession) -> T:
        with container.db.override(db):
            return provider()

    return dependency


RoleServiceDep = Annotated[RoleService, Depends(inject_service(container.role_service))]
UserServiceDep = Annotated[UserService, Depends(inject_service(container.user_service))]
ProductServiceDep = Annotated[ProductService, Depends(inject_service(container.product_service))]
OrderServiceDep = Annotated[OrderService, Depends(inject_service(container.order_service))]
