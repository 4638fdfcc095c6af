"""User entity - aggregate root."""

from dataclasses import dataclass
from datetime import datetime
from typing import Collection, Optional

from domain.user.core.value_objects.identity_profile import IdentityProfile, normalize_email
from domain.user.core.value_objects.user_id import UserId


@dataclass(frozen=True)
class User:
    """User aggregate root.

    Represents a persisted user identity record. The record is immutable:
    it is created from a verified identity profile and can only be deleted.

    Invariants:
    - user_id is assigned by the store and never reassigned
    - identity is set at creation and never updated
    - created_at is timezone-aware; it is set once by the repository clock
      and read back as stored

    Examples:
        >>> profile = IdentityProfile("123", "Test User 1", "test1@test.com")
        >>> user = User(UserId.generate(), profile, datetime.now(timezone.utc))
        >>> user.email
        'test1@test.com'
        >>> user.is_privileged({"test1@test.com"})
        True
    """

    user_id: UserId
    identity: IdentityProfile
    created_at: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.created_at.tzinfo is None:
            raise ValueError("created_at must be timezone-aware")

    @property
    def name(self) -> str:
        """User's display name (mirrors the identity profile)."""
        return self.identity.name

    @property
    def email(self) -> str:
        """User's email (mirrors the identity profile)."""
        return self.identity.email

    def is_privileged(self, privileged_emails: Optional[Collection[str]]) -> bool:
        """Return whether this user's email is in the privileged set.

        Args:
            privileged_emails: Configured privileged emails (any case)

        Returns:
            True if the user is privileged
        """
        if not privileged_emails:
            return False
        return self.email in {normalize_email(e) for e in privileged_emails}
