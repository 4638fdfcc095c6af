"""Identity verifier port (interface)."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from domain.shared.errors import InternalError, UnauthorizedError


@dataclass(frozen=True)
class VerifiedProfile:
    """Trusted identity attributes extracted from a verified token."""

    provider_id: str
    name: str
    email: str


class IIdentityVerifier(ABC):
    """Identity verifier interface.

    Abstracts the identity provider so the user creation flow does not
    depend on which provider issued the token, and so tests can substitute
    a trivial verifier.

    Examples:
        >>> # Implementation example (not actual usage)
        >>> class GoogleIdentityVerifier(IIdentityVerifier):
        ...     async def verify(self, raw_token: str) -> VerifiedProfile:
        ...         # Verify id token with Google JWKS
        ...         pass
    """

    @abstractmethod
    async def verify(self, raw_token: str) -> VerifiedProfile:
        """Verify a caller-supplied token and extract its profile.

        Args:
            raw_token: Opaque token; the format is provider-defined

        Returns:
            VerifiedProfile with provider id, name and email

        Raises:
            InvalidTokenError: Token cannot be parsed or validated, or the
                provider rejects it
            JWKSError: Provider signing keys cannot be fetched
        """
        pass


class InvalidTokenError(UnauthorizedError):
    """Token verification failed."""

    def __init__(self, reason: str):
        """Initialize with failure reason.

        Args:
            reason: Human-readable reason for failure
        """
        self.reason = reason
        super().__init__(f"Invalid token: {reason}")


class JWKSError(InternalError):
    """JWKS fetching or processing failed."""

    def __init__(self, reason: str):
        """Initialize with failure reason.

        Args:
            reason: Human-readable reason for failure
        """
        self.reason = reason
        super().__init__(f"JWKS error: {reason}")
