"""User repository over an injected user store."""

import logging
from datetime import datetime, timezone
from typing import Callable

from domain.shared.errors import InternalError
from domain.shared.storage import StorageError
from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import (
    UserAlreadyExistsError,
    UserCreationError,
    UserNotFoundError,
    UserRemovalError,
)
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.ports.user_store import IUserStore
from domain.user.core.value_objects.identity_profile import IdentityProfile
from domain.user.core.value_objects.user_id import UserId
from infrastructure.user.user_schema import from_document, to_document

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class UserRepository(IUserRepository):
    """User repository backed by any IUserStore.

    Translates StorageError kinds into service errors:
    - DUPLICATE_KEY on create -> UserAlreadyExistsError (Conflict)
    - anything else -> UserCreationError / UserRemovalError (Internal)

    Uniqueness is left to the store's atomic constraint; there is no
    read-then-write check, which would race under concurrent creates.

    Examples:
        >>> repo = UserRepository(InMemoryUserStore())
        >>> user = await repo.create("123", "Test User 1", "test1@test.com")
        >>> same = await repo.get_by_id(str(user.user_id))
    """

    def __init__(self, store: IUserStore, clock: Callable[[], datetime] = _utc_now) -> None:
        """Initialize repository.

        Args:
            store: Store adapter holding the user documents
            clock: Source of creation timestamps (UTC)
        """
        self.store = store
        self._clock = clock

    async def get_by_id(self, user_id: str) -> User:
        logger.info(f"attempting to get user by id '{user_id}'")

        if not UserId.is_valid(user_id):
            logger.error(f"user with id {user_id} does not exist (malformed id)")
            raise UserNotFoundError(user_id)

        try:
            document = await self.store.find_by_id(user_id)
        except StorageError as e:
            logger.error(f"error while loading user '{user_id}'. Error: {e}")
            raise InternalError(f"Unable to load user '{user_id}'") from e

        if document is None:
            logger.error(f"user with id {user_id} does not exist")
            raise UserNotFoundError(user_id)

        try:
            user = from_document(document)
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"stored user '{user_id}' is malformed. Error: {e}")
            raise InternalError(f"Unable to load user '{user_id}'") from e

        logger.info(f"found user '{user.name}' by id '{user_id}'")
        return user

    async def create(self, provider_id: str, name: str, email: str) -> User:
        logger.info(f"attempting to create user with email '{email}'")

        try:
            profile = IdentityProfile(provider_id=provider_id, name=name, email=email)
            document = to_document(profile, self._clock())
            stored = await self.store.insert_one(document)
            user = from_document(stored)
        except StorageError as e:
            if e.is_duplicate_key:
                logger.error(
                    f"could not create user with email {email} "
                    "because a user with that email already exists"
                )
                raise UserAlreadyExistsError(profile.email) from e
            logger.error(f"error while creating user with email '{email}'. Error: {e}")
            raise UserCreationError(email) from e
        except Exception as e:
            logger.error(f"error while creating user with email '{email}'. Error: {e}")
            raise UserCreationError(email) from e

        logger.info(f"successfully created user '{user.user_id}' with email '{user.email}'")
        return user

    async def remove(self, user: User) -> User:
        user_id = str(user.user_id)
        logger.info(f"attempting to remove user '{user_id}'")

        try:
            await self.store.delete_by_id(user_id)
        except StorageError as e:
            logger.error(
                f"error while removing user '{user_id}' with email '{user.email}'. Error: {e}"
            )
            raise UserRemovalError(user_id) from e

        logger.info(f"successfully removed user '{user_id}' with email '{user.email}'")
        return user
