from dependency_injector import containers, providers
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.models import Order, Product, Role, User
from storefront.repositories import Repository, new_id
from storefront.services import OrderService, ProductService, RoleService, UserService


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=AsyncSession)

    # Identifier generation for newly saved entities
    id_factory = providers.Object(new_id)

    # Repositories
    role_repository = providers.Factory(Repository, db=db, model=Role, id_factory=id_factory)
    user_repository = providers.Factory(Repository, db=db, model=User, id_factory=id_factory)
    product_repository = providers.Factory(
        Repository, db=db, model=Product, id_factory=id_factory
    )
    order_repository = providers.Factory(Repository, db=db, model=Order, id_factory=id_factory)

    # Services
    role_service = providers.Factory(RoleService, role_repository=role_repository)
    user_service = providers.Factory(
        UserService,
        user_repository=user_repository,
        role_repository=role_repository,
    )
    product_service = providers.Factory(ProductService, product_repository=product_repository)
    order_service = providers.Factory(
        OrderService,
        order_repository=order_repository,
        user_repository=user_repository,
        product_repository=product_repository,
    )


# Initialize container
container = Container()
