"""Tests for the generic repository against SQLite."""

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.models import Role, User
from storefront.repositories import IdFactory, Repository
from tests.conftest import create_test_role, create_test_user


class TestSaveAndFind:
    @pytest.mark.asyncio
    async def test_save_assigns_id_from_factory(
        self, db_session: AsyncSession, sequential_ids: IdFactory
    ) -> None:
        repository = Repository(db_session, Role, id_factory=sequential_ids)

        first = await repository.save(repository.create(name="admin"))
        second = await repository.save(repository.create(name="user"))

        assert first.id == "id-1"
        assert second.id == "id-2"

    @pytest.mark.asyncio
    async def test_create_does_not_persist(self, db_session: AsyncSession) -> None:
        repository = Repository(db_session, Role)

        role = repository.create(name="admin")

        assert role.id is None
        assert await repository.find() == []

    @pytest.mark.asyncio
    async def test_find_filters_by_criteria(self, db_session: AsyncSession) -> None:
        repository = Repository(db_session, Role)
        await repository.save(repository.create(name="admin"))
        await repository.save(repository.create(name="user"))

        all_roles = await repository.find()
        admins = await repository.find(name="admin")

        assert {role.name for role in all_roles} == {"admin", "user"}
        assert [role.name for role in admins] == ["admin"]

    @pytest.mark.asyncio
    async def test_find_one_returns_none_when_absent(self, db_session: AsyncSession) -> None:
        repository = Repository(db_session, Role)

        assert await repository.find_one(name="admin") is None

    @pytest.mark.asyncio
    async def test_find_one_loads_role_reference(self, db_session: AsyncSession) -> None:
        role = await create_test_role(db_session)
        await create_test_user(db_session, role)
        repository = Repository(db_session, User)

        user = await repository.find_one(email="zxc@gmail.com")

        assert user is not None
        assert user.role.name == "admin"

    @pytest.mark.asyncio
    async def test_constraint_violation_propagates(self, db_session: AsyncSession) -> None:
        repository = Repository(db_session, Role)
        await repository.save(repository.create(name="admin"))

        with pytest.raises(IntegrityError):
            await repository.save(repository.create(name="admin"))

        assert len(await repository.find(name="admin")) == 1


class TestPreload:
    @pytest.mark.asyncio
    async def test_preload_missing_entity_returns_none(self, db_session: AsyncSession) -> None:
        repository = Repository(db_session, User)

        assert await repository.preload("missing", name="New") is None

    @pytest.mark.asyncio
    async def test_preload_leaves_stored_entity_untouched_until_save(
        self, db_session: AsyncSession
    ) -> None:
        role = await create_test_role(db_session)
        stored = await create_test_user(db_session, role)
        repository = Repository(db_session, User)

        merged = await repository.preload(stored.id, name="Qwe")

        assert merged is not None
        assert merged is not stored
        assert merged.name == "Qwe"
        assert merged.surname == "Asd"
        assert stored.name == "Zxc"

        saved = await repository.save(merged)

        assert saved.id == stored.id
        assert saved.name == "Qwe"
        reloaded = await repository.find_one(id=stored.id)
        assert reloaded is not None
        assert reloaded.name == "Qwe"

    @pytest.mark.asyncio
    async def test_preload_replaces_relationship(self, db_session: AsyncSession) -> None:
        admin = await create_test_role(db_session, "admin")
        customer = await create_test_role(db_session, "customer")
        stored = await create_test_user(db_session, admin)
        repository = Repository(db_session, User)

        merged = await repository.preload(stored.id, role=customer)
        assert merged is not None
        saved = await repository.save(merged)

        assert saved.role_id == customer.id
        assert saved.role.name == "customer"


class TestRemove:
    @pytest.mark.asyncio
    async def test_remove_returns_snapshot(self, db_session: AsyncSession) -> None:
        role = await create_test_role(db_session)
        stored = await create_test_user(db_session, role)
        repository = Repository(db_session, User)

        removed = await repository.remove(stored)

        assert removed.id == "user-1"
        assert removed.email == "zxc@gmail.com"
        assert await repository.find_one(id="user-1") is None
