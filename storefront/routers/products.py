from fastapi import APIRouter

from storefront.dependencies import ProductServiceDep
from storefront.schemas.product_schemas import (
    ProductCreateRequest,
    ProductResponse,
    ProductUpdateRequest,
)

router = APIRouter(prefix="/products", tags=["products"])


@router.get("")
async def list_products(service: ProductServiceDep) -> list[ProductResponse]:
    """Get all products."""
    return [ProductResponse.model_validate(product) for product in await service.find_all()]


@router.get("/{product_id}")
async def get_product(product_id: str, service: ProductServiceDep) -> ProductResponse:
    """Get a product by ID."""
    return ProductResponse.model_validate(await service.find_one(product_id))


@router.post("", status_code=201)
async def create_product(dto: ProductCreateRequest, service: ProductServiceDep) -> ProductResponse:
    """Create a product."""
    return ProductResponse.model_validate(await service.create(dto))


@router.put("/{product_id}")
async def update_product(
    product_id: str, dto: ProductUpdateRequest, service: ProductServiceDep
) -> ProductResponse:
    """Replace a product's fields."""
    return ProductResponse.model_validate(await service.update(product_id, dto))


@router.delete("/{product_id}")
async def delete_product(product_id: str, service: ProductServiceDep) -> ProductResponse:
    """Delete a product and return the removed record."""
    return ProductResponse.model_validate(await service.remove(product_id))
