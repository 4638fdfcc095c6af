"""User service: the entry point the HTTP layer calls for users."""

from domain.user.auth.ports.identity_verifier import IIdentityVerifier
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository

from application.user.commands.create_user import CreateUserCommand
from application.user.commands.remove_user import RemoveUserCommand
from application.user.queries.get_user import GetUserQuery


class UserService:
    """Orchestrates identity verification and user persistence.

    Constructed once at startup with an injected verifier and repository.
    Every failure leaves as a service error (not found, conflict,
    unauthorized or internal).
    """

    def __init__(self, verifier: IIdentityVerifier, repository: IUserRepository) -> None:
        self.verifier = verifier
        self.repository = repository
        self._create = CreateUserCommand(verifier=verifier, repository=repository)
        self._remove = RemoveUserCommand(repository=repository)
        self._get = GetUserQuery(repository=repository)

    async def create(self, raw_token: str) -> User:
        return await self._create.execute(raw_token)

    async def get(self, user_id: str) -> User:
        return await self._get.by_id(user_id)

    async def remove(self, user_id: str) -> User:
        return await self._remove.execute(user_id)
