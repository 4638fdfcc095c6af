"""Get user query."""

from dataclasses import dataclass

from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository


@dataclass
class GetUserQuery:
    """Query to get user by id.

    Read-only operation that retrieves user from repository.

    Examples:
        >>> query = GetUserQuery(repository)
        >>> user = await query.by_id("5b52594de29d171ae09642da")
    """

    repository: IUserRepository

    async def by_id(self, user_id: str) -> User:
        """Get user by id.

        Raises:
            UserNotFoundError: If no user has this id
        """
        return await self.repository.get_by_id(user_id)
