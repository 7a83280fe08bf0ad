"""Pydantic schemas for Order API request/response validation."""

from datetime import datetime

from pydantic import Field

from storefront.schemas.base_schemas import CamelModel, CamelResponse
from storefront.schemas.product_schemas import ProductResponse


class OrderCreateRequest(CamelModel):
    """Schema for placing an Order."""

    user_id: str = Field(..., min_length=1, description="Id of the ordering user")
    product_ids: list[str] = Field(..., min_length=1, description="Ids of ordered products")


class OrderResponse(CamelResponse):
    """Schema for Order response."""

    id: str
    user_id: str
    products: list[ProductResponse]
    created_at: datetime
