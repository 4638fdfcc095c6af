"""UserId value object."""

from dataclasses import dataclass

from bson import ObjectId


@dataclass(frozen=True)
class UserId:
    """User identifier value object.

    Assigned by the store at creation (MongoDB ObjectId hex string).
    Immutable and never reassigned.

    Examples:
        >>> user_id = UserId("5b52594de29d171ae09642da")
        >>> str(user_id)
        '5b52594de29d171ae09642da'

        >>> UserId.is_valid("not-an-id")
        False
    """

    value: str

    def __post_init__(self) -> None:
        """Validate ObjectId format."""
        if not self.is_valid(self.value):
            raise ValueError(f"Invalid user id format: {self.value}")

    @staticmethod
    def is_valid(value: object) -> bool:
        """Check whether ``value`` is a well-formed store id."""
        return isinstance(value, str) and ObjectId.is_valid(value)

    @staticmethod
    def generate() -> "UserId":
        """Generate a new id the way the store does.

        Used by in-memory stores only; real ids come from MongoDB.
        """
        return UserId(str(ObjectId()))

    def __str__(self) -> str:
        """String representation returns the hex value."""
        return self.value

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"UserId('{self.value}')"
