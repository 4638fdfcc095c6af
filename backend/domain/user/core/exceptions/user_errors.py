"""User domain exceptions."""

from domain.shared.errors import ConflictError, InternalError, NotFoundError


class UserNotFoundError(NotFoundError):
    """User was not found in the store."""

    def __init__(self, identifier: str):
        """Initialize with user identifier.

        Args:
            identifier: User id that was not found
        """
        self.identifier = identifier
        super().__init__(f"user with id {identifier} does not exist")


class UserAlreadyExistsError(ConflictError):
    """A user with the given email already exists."""

    def __init__(self, email: str):
        """Initialize with the conflicting email.

        Args:
            email: Email that violated the uniqueness constraint
        """
        self.email = email
        super().__init__(f"A user with email '{email}' already exists")


class UserCreationError(InternalError):
    """User could not be persisted for an unclassified reason."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Unable to create user with email '{email}'")


class UserRemovalError(InternalError):
    """User could not be deleted."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Unable to remove user '{identifier}'")
