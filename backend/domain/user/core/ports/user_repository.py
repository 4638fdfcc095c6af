"""User repository port (interface)."""

from abc import ABC, abstractmethod

from domain.user.core.entities.user import User


class IUserRepository(ABC):
    """Repository interface for the User aggregate.

    Owns the create/read/delete lifecycle of user records and translates
    storage failures into service error kinds. No other component mutates
    persisted users.
    """

    @abstractmethod
    async def get_by_id(self, user_id: str) -> User:
        """Get user by id.

        Args:
            user_id: Store-assigned user id

        Returns:
            User entity

        Raises:
            UserNotFoundError: If no user has this id
            InternalError: If the lookup fails
        """
        pass

    @abstractmethod
    async def create(self, provider_id: str, name: str, email: str) -> User:
        """Persist a new user from a verified identity profile.

        Uniqueness of ``email`` is enforced by the store, not by a
        read-then-write check here.

        Returns:
            The created user including its assigned id

        Raises:
            UserAlreadyExistsError: If a user with ``email`` already exists
            UserCreationError: For any other persistence failure
        """
        pass

    @abstractmethod
    async def remove(self, user: User) -> User:
        """Delete an already-loaded user.

        Returns:
            The user that was deleted

        Raises:
            UserRemovalError: If the delete cannot complete, including when
                the record was concurrently removed
        """
        pass
