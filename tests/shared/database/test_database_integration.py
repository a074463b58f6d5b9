from uuid import uuid4

import pytest

from src.shared.database.unit_of_work import UnitOfWork
from src.shared.exceptions import ForeignKeyViolation, UniqueViolation
from tests.shared.database.mock_entities import OrderModel, UserMapper, UserModel, get_test_entity_mapper
from tests.shared.database.mock_repository import UserRepository


@pytest.fixture
def user_repository(clean_database):
    """Create a user repository."""
    return UserRepository(clean_database, UserMapper())


@pytest.fixture
def unit_of_work(clean_database):
    """Create a unit of work."""
    return UnitOfWork(clean_database, get_test_entity_mapper())


def make_user(name: str = "John Doe", email: str = "john.doe@example.com") -> UserModel:
    return UserModel(id=uuid4(), name=name, email=email)


@pytest.mark.asyncio
async def test_persist_user_via_unit_of_work(unit_of_work, user_repository):
    """Test persisting a user entity via unit of work."""
    # Arrange
    user = make_user()

    # Act
    async with unit_of_work:
        unit_of_work.add(user)

    # Assert
    retrieved = await user_repository.get_by_id(user.id)
    assert retrieved == user


@pytest.mark.asyncio
async def test_update_user_via_unit_of_work(unit_of_work, user_repository):
    user = make_user()
    async with unit_of_work:
        unit_of_work.add(user)

    async with unit_of_work:
        await unit_of_work.update(user.model_copy(update={"name": "Johnny Doe"}))

    retrieved = await user_repository.get_by_id(user.id)
    assert retrieved is not None
    assert retrieved.name == "Johnny Doe"
    assert retrieved.email == user.email


@pytest.mark.asyncio
async def test_delete_user_via_unit_of_work(unit_of_work, user_repository):
    user = make_user()
    async with unit_of_work:
        unit_of_work.add(user)

    async with unit_of_work:
        await unit_of_work.delete(user)

    assert await user_repository.get_by_id(user.id) is None


@pytest.mark.asyncio
async def test_rollback_on_exception(unit_of_work, user_repository):
    """Test that nothing is persisted when the block raises."""
    user = make_user()

    with pytest.raises(RuntimeError):
        async with unit_of_work:
            unit_of_work.add(user)
            raise RuntimeError("boom")

    assert await user_repository.get_by_id(user.id) is None


@pytest.mark.asyncio
async def test_duplicate_unique_value_raises_unique_violation(unit_of_work, user_repository):
    async with unit_of_work:
        unit_of_work.add(make_user(name="First"))

    with pytest.raises(UniqueViolation):
        async with unit_of_work:
            unit_of_work.add(make_user(name="Second"))

    users = await user_repository.get_all()
    assert [u.name for u in users] == ["First"]


@pytest.mark.asyncio
async def test_orphan_reference_raises_foreign_key_violation(unit_of_work):
    with pytest.raises(ForeignKeyViolation):
        async with unit_of_work:
            unit_of_work.add(OrderModel(id=uuid4(), user_id=uuid4(), amount=10.0))


@pytest.mark.asyncio
async def test_deleting_referenced_row_raises_foreign_key_violation(unit_of_work, user_repository):
    user = make_user()
    async with unit_of_work:
        unit_of_work.add(user)
    async with unit_of_work:
        unit_of_work.add(OrderModel(id=uuid4(), user_id=user.id, amount=10.0))

    with pytest.raises(ForeignKeyViolation):
        async with unit_of_work:
            await unit_of_work.delete(user)

    assert await user_repository.get_by_id(user.id) is not None
    assert await user_repository.count_orders(user.id) == 1
