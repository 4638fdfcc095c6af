"""IdentityProfile value object."""

from dataclasses import dataclass


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def is_valid_email(email: str) -> bool:
    """Whether ``email`` has a local part, an ``@`` and a domain."""
    local, sep, domain = normalize_email(email).rpartition("@")
    return bool(sep and local and domain)


@dataclass(frozen=True)
class IdentityProfile:
    """Identity attributes sourced from the identity provider.

    Set once at user creation and never updated. The email is normalized
    (trimmed, lower-cased) so the store's unique index is case-insensitive.

    Examples:
        >>> profile = IdentityProfile("123", "Test User 1", " Test1@Test.com ")
        >>> profile.email
        'test1@test.com'
    """

    provider_id: str
    name: str
    email: str

    def __post_init__(self) -> None:
        """Validate and normalize fields."""
        provider_id = (self.provider_id or "").strip()
        name = (self.name or "").strip()
        email = normalize_email(self.email)

        if not provider_id:
            raise ValueError("Identity provider id cannot be empty")
        if not name:
            raise ValueError("Identity name cannot be empty")
        if not is_valid_email(email):
            raise ValueError(f"Invalid email address: {self.email!r}")

        # frozen dataclass: bypass __setattr__ to store normalized values
        object.__setattr__(self, "provider_id", provider_id)
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "email", email)
