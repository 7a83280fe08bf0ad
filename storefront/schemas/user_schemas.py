"""Pydantic schemas for User API request/response validation."""

from pydantic import Field

from storefront.schemas.base_schemas import CamelModel, CamelResponse
from storefront.schemas.role_schemas import RoleResponse


class UserBase(CamelModel):
    """Base schema for User."""

    name: str = Field(..., min_length=1, max_length=100, description="First name")
    surname: str = Field(..., min_length=1, max_length=100, description="Last name")
    email: str = Field(..., min_length=3, max_length=100, description="Email address")
    phone_number: str = Field(..., min_length=1, max_length=32, description="Phone number")


class UserCreateRequest(UserBase):
    """Schema for creating a user under an existing role."""

    password: str = Field(..., min_length=1, max_length=255, description="Password hash")
    role_name: str = Field(..., min_length=1, max_length=100, description="Name of the role")


class UserUpdateRequest(UserCreateRequest):
    """Schema for replacing a user's fields. The role is resolved again by name."""


class UserResponse(CamelResponse):
    """Schema for User response. The password is never returned."""

    id: str
    name: str
    surname: str
    email: str
    phone_number: str
    role: RoleResponse
