"""Identity verifier factory for environment-based selection.

Selects the verifier from the IDENTITY_PROVIDER environment variable:
- "google": GoogleIdentityVerifier (default, production)
- "json": JsonProfileVerifier (tests and local development only)
"""

from domain.user.auth.ports.identity_verifier import IIdentityVerifier
from infrastructure.config import get_identity_provider
from infrastructure.user.google_verifier import GoogleIdentityVerifier
from infrastructure.user.json_profile_verifier import JsonProfileVerifier


def create_identity_verifier() -> IIdentityVerifier:
    """Create identity verifier based on environment configuration.

    Returns:
        IIdentityVerifier: The configured verifier

    Environment Variables:
        IDENTITY_PROVIDER: "google" | "json" (default: google)
        GOOGLE_CLIENT_ID: Required for google

    Raises:
        ValueError: If the provider is unknown or misconfigured
    """
    provider = get_identity_provider()

    if provider == "google":
        return GoogleIdentityVerifier()

    elif provider == "json":
        return JsonProfileVerifier()

    else:
        raise ValueError(
            f"Invalid IDENTITY_PROVIDER value: {provider}. " "Expected 'google' or 'json'"
        )
