"""Pydantic schemas for roles."""

from pydantic import Field

from storefront.schemas.base_schemas import CamelModel, CamelResponse


class RoleCreateRequest(CamelModel):
    """Schema for creating a role."""

    name: str = Field(..., min_length=1, max_length=100, description="Unique role name")


class RoleResponse(CamelResponse):
    """Schema for returning a role."""

    id: str = Field(..., description="Role id")
    name: str = Field(..., description="Role name")
