"""Service layer for user lifecycle operations."""

import structlog

from storefront.exceptions import RoleNotFoundError, UserNotFoundError
from storefront.models import Role, User
from storefront.repositories import Repository
from storefront.schemas.user_schemas import UserCreateRequest, UserUpdateRequest

logger = structlog.get_logger(__name__)


class UserService:
    """
    Service for user lifecycle operations.

    Every user the service persists references a role that exists in the role
    store. A role name that cannot be resolved aborts the operation before
    anything is written.
    """

    def __init__(
        self,
        user_repository: Repository[User],
        role_repository: Repository[Role],
    ) -> None:
        """Initialize service with the user and role stores."""
        self.user_repository = user_repository
        self.role_repository = role_repository

    async def find_all(self) -> list[User]:
        """Get all users."""
        return await self.user_repository.find()

    async def find_one(self, user_id: str) -> User:
        """
        Get a user by ID.

        Raises:
            UserNotFoundError: If no user is stored under ``user_id``
        """
        user = await self.user_repository.find_one(id=user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def find_one_by_email(self, email: str) -> User | None:
        """Get a user by email, or None if nobody registered with it."""
        return await self.user_repository.find_one(email=email)

    async def create(self, dto: UserCreateRequest) -> User:
        """
        Create a user under an existing role.

        Args:
            dto: User fields plus the name of the role to assign

        Returns:
            The persisted user with its generated id

        Raises:
            RoleNotFoundError: If ``dto.role_name`` does not name a stored role
        """
        role = await self._resolve_role(dto.role_name)

        user = self.user_repository.create(**self._user_fields(dto), role=role)
        user = await self.user_repository.save(user)

        logger.info("user_created", user_id=user.id, role=role.name)
        return user

    async def update(self, user_id: str, dto: UserUpdateRequest) -> User:
        """
        Replace a user's fields and re-resolve its role.

        Raises:
            RoleNotFoundError: If ``dto.role_name`` does not name a stored role
            UserNotFoundError: If no user is stored under ``user_id``
        """
        role = await self._resolve_role(dto.role_name)

        user = await self.user_repository.preload(user_id, **self._user_fields(dto), role=role)
        if user is None:
            raise UserNotFoundError(user_id)

        user = await self.user_repository.save(user)

        logger.info("user_updated", user_id=user_id, role=role.name)
        return user

    async def remove(self, user_id: str) -> User:
        """
        Delete a user and return the removed record.

        Raises:
            UserNotFoundError: If no user is stored under ``user_id``
        """
        user = await self.find_one(user_id)
        removed = await self.user_repository.remove(user)

        logger.info("user_removed", user_id=user_id)
        return removed

    async def _resolve_role(self, role_name: str) -> Role:
        role = await self.role_repository.find_one(name=role_name)
        if role is None:
            raise RoleNotFoundError(role_name)
        return role

    @staticmethod
    def _user_fields(dto: UserCreateRequest) -> dict[str, str]:
        return dto.model_dump(exclude={"role_name"})
