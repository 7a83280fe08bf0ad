"""Service layer for roles."""

import structlog

from storefront.exceptions import ConflictError, RoleNotFoundError
from storefront.models import Role
from storefront.repositories import Repository
from storefront.schemas.role_schemas import RoleCreateRequest

logger = structlog.get_logger(__name__)


class RoleService:
    """Service for looking up and registering roles."""

    def __init__(self, role_repository: Repository[Role]) -> None:
        self.role_repository = role_repository

    async def find_all(self) -> list[Role]:
        return await self.role_repository.find()

    async def find_one_by_name(self, name: str) -> Role:
        """
        Get a role by its name.

        Raises:
            RoleNotFoundError: If no role carries ``name``
        """
        role = await self.role_repository.find_one(name=name)
        if role is None:
            raise RoleNotFoundError(name)
        return role

    async def create(self, dto: RoleCreateRequest) -> Role:
        """
        Register a new role.

        Raises:
            ConflictError: If a role with the same name already exists
        """
        if await self.role_repository.find_one(name=dto.name) is not None:
            raise ConflictError(f"Role {dto.name} already exists")

        role = await self.role_repository.save(self.role_repository.create(name=dto.name))

        logger.info("role_created", role_id=role.id, name=role.name)
        return role
