"""Service layer for orders."""

import structlog

from storefront.exceptions import OrderNotFoundError, ProductNotFoundError, UserNotFoundError
from storefront.models import Order, Product, User
from storefront.repositories import Repository
from storefront.schemas.order_schemas import OrderCreateRequest

logger = structlog.get_logger(__name__)


class OrderService:
    """Service for placing and looking up orders."""

    def __init__(
        self,
        order_repository: Repository[Order],
        user_repository: Repository[User],
        product_repository: Repository[Product],
    ) -> None:
        """Initialize service with the order, user and product stores."""
        self.order_repository = order_repository
        self.user_repository = user_repository
        self.product_repository = product_repository

    async def find_all(self) -> list[Order]:
        return await self.order_repository.find()

    async def find_one(self, order_id: str) -> Order:
        """
        Get an order by ID.

        Raises:
            OrderNotFoundError: If no order is stored under ``order_id``
        """
        order = await self.order_repository.find_one(id=order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

    async def create(self, dto: OrderCreateRequest) -> Order:
        """
        Place an order for a user.

        The user and every product are resolved before anything is persisted.
        Repeated product ids are ordered once.

        Raises:
            UserNotFoundError: If ``dto.user_id`` does not name a stored user
            ProductNotFoundError: If any of ``dto.product_ids`` is unknown
        """
        user = await self.user_repository.find_one(id=dto.user_id)
        if user is None:
            raise UserNotFoundError(dto.user_id)

        products: list[Product] = []
        for product_id in dict.fromkeys(dto.product_ids):
            product = await self.product_repository.find_one(id=product_id)
            if product is None:
                raise ProductNotFoundError(product_id)
            products.append(product)

        order = self.order_repository.create(user=user, products=products)
        order = await self.order_repository.save(order)

        logger.info("order_created", order_id=order.id, user_id=user.id, products=len(products))
        return order

    async def remove(self, order_id: str) -> Order:
        order = await self.find_one(order_id)
        removed = await self.order_repository.remove(order)

        logger.info("order_removed", order_id=order_id)
        return removed
