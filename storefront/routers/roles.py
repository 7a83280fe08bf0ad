from fastapi import APIRouter

from storefront.dependencies import RoleServiceDep
from storefront.schemas.role_schemas import RoleCreateRequest, RoleResponse

router = APIRouter(prefix="/roles", tags=["roles"])


@router.get("")
async def list_roles(service: RoleServiceDep) -> list[RoleResponse]:
    """Get all roles."""
    return [RoleResponse.model_validate(role) for role in await service.find_all()]


@router.get("/{name}")
async def get_role(name: str, service: RoleServiceDep) -> RoleResponse:
    """Get a role by name."""
    return RoleResponse.model_validate(await service.find_one_by_name(name))


@router.post("", status_code=201)
async def create_role(dto: RoleCreateRequest, service: RoleServiceDep) -> RoleResponse:
    """Register a role. Names are unique."""
    return RoleResponse.model_validate(await service.create(dto))
