"""Remove user command."""

from dataclasses import dataclass

from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository


@dataclass
class RemoveUserCommand:
    """Command to delete a user by id.

    Loads the user first so a missing id is reported as not found, then
    deletes it. A concurrent removal between load and delete surfaces as
    an internal error rather than a second success.
    """

    repository: IUserRepository

    async def execute(self, user_id: str) -> User:
        """Execute remove command.

        Returns:
            The user as it was before removal
        """
        user = await self.repository.get_by_id(user_id)
        return await self.repository.remove(user)
