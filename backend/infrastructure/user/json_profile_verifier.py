"""Identity verifier that trusts a JSON profile token.

For tests and local development only. The token is the serialized
profile itself, e.g. ``{"id": "123", "name": "Test User 1",
"email": "test1@test.com"}``; nothing is verified cryptographically.
It is only constructed when IDENTITY_PROVIDER=json is set explicitly.
"""

import json
import logging

from domain.user.auth.ports.identity_verifier import (
    IIdentityVerifier,
    InvalidTokenError,
    VerifiedProfile,
)
from domain.user.core.value_objects.identity_profile import is_valid_email

logger = logging.getLogger(__name__)


class JsonProfileVerifier(IIdentityVerifier):
    """Parse the token as a pre-serialized identity profile."""

    def __init__(self) -> None:
        logger.warning("JsonProfileVerifier enabled: identity tokens are NOT verified")

    async def verify(self, raw_token: str) -> VerifiedProfile:
        try:
            data = json.loads(raw_token or "")
        except (TypeError, ValueError) as e:
            raise InvalidTokenError("Token is not a JSON profile") from e

        if not isinstance(data, dict):
            raise InvalidTokenError("Token is not a JSON profile")

        fields = {}
        for key in ("id", "name", "email"):
            value = data.get(key)
            if not isinstance(value, str) or not value.strip():
                raise InvalidTokenError(f"Profile missing '{key}'")
            fields[key] = value.strip()

        if not is_valid_email(fields["email"]):
            raise InvalidTokenError(f"Profile email is malformed: {fields['email']!r}")

        return VerifiedProfile(
            provider_id=fields["id"],
            name=fields["name"],
            email=fields["email"],
        )
