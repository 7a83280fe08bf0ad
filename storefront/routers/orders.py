from fastapi import APIRouter

from storefront.dependencies import OrderServiceDep
from storefront.schemas.order_schemas import OrderCreateRequest, OrderResponse

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("")
async def list_orders(service: OrderServiceDep) -> list[OrderResponse]:
    """Get all orders."""
    return [OrderResponse.model_validate(order) for order in await service.find_all()]


@router.get("/{order_id}")
async def get_order(order_id: str, service: OrderServiceDep) -> OrderResponse:
    """Get an order by ID."""
    return OrderResponse.model_validate(await service.find_one(order_id))


@router.post("", status_code=201)
async def create_order(dto: OrderCreateRequest, service: OrderServiceDep) -> OrderResponse:
    """Place an order. Unknown users or products answer 404 and nothing is stored."""
    return OrderResponse.model_validate(await service.create(dto))


@router.delete("/{order_id}")
async def delete_order(order_id: str, service: OrderServiceDep) -> OrderResponse:
    """Delete an order and return the removed record."""
    return OrderResponse.model_validate(await service.remove(order_id))
