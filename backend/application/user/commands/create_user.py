"""Create user command."""

from dataclasses import dataclass

from domain.user.auth.ports.identity_verifier import IIdentityVerifier
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository


@dataclass
class CreateUserCommand:
    """Command to create a user from a caller-supplied identity token.

    The token is verified first; the repository is never called when
    verification fails. Errors from either step propagate unchanged.

    Examples:
        >>> command = CreateUserCommand(verifier, repository)
        >>> user = await command.execute(id_token)
    """

    verifier: IIdentityVerifier
    repository: IUserRepository

    async def execute(self, raw_token: str) -> User:
        """Execute create command.

        Args:
            raw_token: Identity token from the identity provider

        Returns:
            Newly created User

        Raises:
            UnauthorizedError: Token verification failed
            UserAlreadyExistsError: A user with the verified email exists
            InternalError: Persistence failed
        """
        profile = await self.verifier.verify(raw_token)
        return await self.repository.create(profile.provider_id, profile.name, profile.email)
