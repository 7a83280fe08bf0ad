"""Pydantic schemas for Product API request/response validation."""

from pydantic import Field

from storefront.schemas.base_schemas import CamelModel, CamelResponse


class ProductBase(CamelModel):
    """Base schema for Product."""

    name: str = Field(..., min_length=1, max_length=255, description="Product name")
    vendor_code: str = Field(..., min_length=1, max_length=100, description="Vendor code")
    weight: str = Field(..., max_length=50, description="Weight as displayed")
    price: str = Field(..., max_length=50, description="Price as displayed")
    photo: str = Field(..., max_length=500, description="Photo URL or path")
    description: str = Field(..., description="Product description")
    size: str = Field(..., max_length=50, description="Size as displayed")


class ProductCreateRequest(ProductBase):
    """Schema for creating a Product."""


class ProductUpdateRequest(ProductBase):
    """Schema for replacing a Product's fields."""


class ProductResponse(CamelResponse):
    """Schema for Product response."""

    id: str
    name: str
    vendor_code: str
    weight: str
    price: str
    photo: str
    description: str
    size: str
