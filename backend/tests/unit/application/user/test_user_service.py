"""Tests for UserService and the user commands it composes."""

import json
from unittest.mock import AsyncMock

import pytest

from application.user.commands.create_user import CreateUserCommand
from application.user.commands.remove_user import RemoveUserCommand
from application.user.queries.get_user import GetUserQuery
from domain.shared.errors import ConflictError, InternalError, NotFoundError, UnauthorizedError
from domain.user.auth.ports.identity_verifier import InvalidTokenError
from domain.user.core.ports.user_repository import IUserRepository


@pytest.fixture
def failing_verifier():
    """Verifier that rejects every token."""
    verifier = AsyncMock()
    verifier.verify.side_effect = InvalidTokenError("bad signature")
    return verifier


@pytest.mark.asyncio
async def test_create_user_from_token(service, user_one):
    """Test creating a user from a verified token."""
    user = await service.create(user_one.id_token)

    assert user.identity.provider_id == "123456789"
    assert user.name == "Test User 1"
    assert user.email == "test1@test.com"


@pytest.mark.asyncio
async def test_create_same_user_twice_is_conflict(service):
    """Test the second create for the same email fails with Conflict."""
    token = json.dumps({"id": "123", "name": "Test User 1", "email": "test1@test.com"})
    first = await service.create(token)

    with pytest.raises(ConflictError) as exc_info:
        await service.create(token)

    assert "already exists" in str(exc_info.value)
    assert exc_info.value.status_code == 409
    assert exc_info.value.is_public is True

    # The first user is unchanged
    again = await service.get(str(first.user_id))
    assert again == first


@pytest.mark.asyncio
async def test_distinct_emails_create_distinct_users(service, user_one, user_two):
    first = await service.create(user_one.id_token)
    second = await service.create(user_two.id_token)

    assert first.user_id != second.user_id


@pytest.mark.asyncio
async def test_unauthorized_never_reaches_repository(failing_verifier):
    """Test the repository is not called when verification fails."""
    repository = AsyncMock(spec=IUserRepository)
    command = CreateUserCommand(verifier=failing_verifier, repository=repository)

    with pytest.raises(UnauthorizedError):
        await command.execute("token")

    repository.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_invalid_token_through_service(service):
    with pytest.raises(UnauthorizedError):
        await service.create("not a profile")


@pytest.mark.asyncio
async def test_get_user_not_found(service, invalid_id):
    with pytest.raises(NotFoundError):
        await service.get(invalid_id)


@pytest.mark.asyncio
async def test_get_user_query(repository, user_one, service):
    created = await service.create(user_one.id_token)

    user = await GetUserQuery(repository).by_id(str(created.user_id))

    assert user == created


@pytest.mark.asyncio
async def test_remove_then_get_is_not_found(service, user_one):
    created = await service.create(user_one.id_token)

    removed = await service.remove(str(created.user_id))

    assert removed == created
    with pytest.raises(NotFoundError):
        await service.get(str(created.user_id))


@pytest.mark.asyncio
async def test_remove_unknown_user_is_not_found(repository, invalid_id):
    with pytest.raises(NotFoundError):
        await RemoveUserCommand(repository).execute(invalid_id)


@pytest.mark.asyncio
async def test_remove_lost_race_is_internal(service, store, user_one):
    """Test a user deleted between load and delete surfaces as Internal."""
    created = await service.create(user_one.id_token)
    await store.delete_by_id(str(created.user_id))

    with pytest.raises(InternalError):
        await service.repository.remove(created)


@pytest.mark.asyncio
async def test_malformed_email_in_token_is_unauthorized(service, store):
    """Test a profile with a malformed email is rejected before persistence."""
    token = json.dumps({"id": "1", "name": "X", "email": "not-an-email"})

    with pytest.raises(UnauthorizedError) as exc_info:
        await service.create(token)

    assert exc_info.value.status_code == 401
    assert store.count() == 0
