"""Service layer for products."""

import structlog

from storefront.exceptions import ProductNotFoundError
from storefront.models import Product
from storefront.repositories import Repository
from storefront.schemas.product_schemas import ProductCreateRequest, ProductUpdateRequest

logger = structlog.get_logger(__name__)


class ProductService:
    """Service for product CRUD operations."""

    def __init__(self, product_repository: Repository[Product]) -> None:
        self.product_repository = product_repository

    async def find_all(self) -> list[Product]:
        return await self.product_repository.find()

    async def find_one(self, product_id: str) -> Product:
        """
        Get a product by ID.

        Raises:
            ProductNotFoundError: If no product is stored under ``product_id``
        """
        product = await self.product_repository.find_one(id=product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    async def create(self, dto: ProductCreateRequest) -> Product:
        product = self.product_repository.create(**dto.model_dump())
        product = await self.product_repository.save(product)

        logger.info("product_created", product_id=product.id, vendor_code=product.vendor_code)
        return product

    async def update(self, product_id: str, dto: ProductUpdateRequest) -> Product:
        """
        Replace a product's fields.

        Raises:
            ProductNotFoundError: If no product is stored under ``product_id``
        """
        product = await self.product_repository.preload(product_id, **dto.model_dump())
        if product is None:
            raise ProductNotFoundError(product_id)

        product = await self.product_repository.save(product)

        logger.info("product_updated", product_id=product_id)
        return product

    async def remove(self, product_id: str) -> Product:
        product = await self.find_one(product_id)
        removed = await self.product_repository.remove(product)

        logger.info("product_removed", product_id=product_id)
        return removed
