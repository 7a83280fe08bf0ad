from fastapi import APIRouter, Query

from storefront.dependencies import UserServiceDep
from storefront.exceptions import NotFoundError
from storefront.schemas.user_schemas import UserCreateRequest, UserResponse, UserUpdateRequest

router = APIRouter(prefix="/users", tags=["users"])


@router.get("")
async def list_users(service: UserServiceDep) -> list[UserResponse]:
    """Get all users."""
    users = await service.find_all()
    return [UserResponse.model_validate(user) for user in users]


@router.get("/by-email")
async def get_user_by_email(
    service: UserServiceDep,
    email: str = Query(..., min_length=3, description="Email address to look up"),
) -> UserResponse:
    """Get the user registered with an email address."""
    user = await service.find_one_by_email(email)
    if user is None:
        raise NotFoundError(f"There is no user with email {email}")
    return UserResponse.model_validate(user)


@router.get("/{user_id}")
async def get_user(user_id: str, service: UserServiceDep) -> UserResponse:
    """Get a user by ID."""
    return UserResponse.model_validate(await service.find_one(user_id))


@router.post("", status_code=201)
async def create_user(dto: UserCreateRequest, service: UserServiceDep) -> UserResponse:
    """
    Create a user.

    The role is looked up by ``roleName``; an unknown role answers 404 and
    nothing is stored.
    """
    return UserResponse.model_validate(await service.create(dto))


@router.put("/{user_id}")
async def update_user(
    user_id: str, dto: UserUpdateRequest, service: UserServiceDep
) -> UserResponse:
    """Replace a user's fields and role."""
    return UserResponse.model_validate(await service.update(user_id, dto))


@router.delete("/{user_id}")
async def delete_user(user_id: str, service: UserServiceDep) -> UserResponse:
    """Delete a user and return the removed record."""
    return UserResponse.model_validate(await service.remove(user_id))
