"""Google identity token verifier implementation."""

from typing import Dict, Any, Optional
import aiohttp
import jwt
from jwt import PyJWK
from jwt.exceptions import PyJWTError, ExpiredSignatureError
from cachetools import TTLCache

from domain.user.auth.ports.identity_verifier import (
    IIdentityVerifier,
    InvalidTokenError,
    JWKSError,
    VerifiedProfile,
)
from domain.user.core.value_objects.identity_profile import is_valid_email
from infrastructure.config import get_google_client_id

GOOGLE_JWKS_URL = "https://www.googleapis.com/oauth2/v3/certs"
GOOGLE_ISSUERS = ("accounts.google.com", "https://accounts.google.com")


class GoogleIdentityVerifier(IIdentityVerifier):
    """Google identity token verifier.

    Verifies Google-issued id tokens (RS256) against Google's JWKS and
    extracts the caller's profile.

    Features:
    - RS256 JWT verification with JWKS
    - JWKS caching with 1-hour TTL
    - Audience (client id) and issuer validation
    - Requires ``email`` claim; ``name`` falls back to the email

    Environment Variables:
    - GOOGLE_CLIENT_ID: OAuth client id, the expected token audience

    Examples:
        >>> verifier = GoogleIdentityVerifier()
        >>> profile = await verifier.verify(id_token)
        >>> profile.email
        'user@gmail.com'
    """

    def __init__(
        self,
        client_id: Optional[str] = None,
        jwks_url: str = GOOGLE_JWKS_URL,
        jwks_cache_ttl: int = 3600,
    ):
        """Initialize Google verifier.

        Args:
            client_id: OAuth client id (defaults to env GOOGLE_CLIENT_ID)
            jwks_url: Google JWKS endpoint
            jwks_cache_ttl: JWKS cache TTL in seconds (default: 3600 = 1h)

        Raises:
            ValueError: If client id is missing
        """
        self.client_id = client_id or get_google_client_id()
        self.jwks_url = jwks_url

        if not self.client_id:
            raise ValueError("GOOGLE_CLIENT_ID is required")

        self.jwks_cache: TTLCache[str, Dict[str, Any]] = TTLCache(maxsize=10, ttl=jwks_cache_ttl)

    async def verify(self, raw_token: str) -> VerifiedProfile:
        """Verify a Google id token.

        Args:
            raw_token: Google id token (JWT)

        Returns:
            VerifiedProfile built from ``sub``, ``name`` and ``email`` claims

        Raises:
            InvalidTokenError: If token is invalid, expired, or malformed
            JWKSError: If JWKS fetching fails
        """
        token = (raw_token or "").strip()
        if not token:
            raise InvalidTokenError("Token is empty")

        claims = await self._decode(token)
        return self._profile_from_claims(claims)

    async def _decode(self, token: str) -> Dict[str, Any]:
        try:
            unverified_header = jwt.get_unverified_header(token)
        except PyJWTError as e:
            raise InvalidTokenError(f"Malformed token: {str(e)}") from e

        kid = unverified_header.get("kid")
        if not kid:
            raise InvalidTokenError("Token header missing 'kid'")

        # Google rotates keys; refresh on unknown kid
        if kid not in self.jwks_cache:
            await self._refresh_jwks()

        rsa_key_dict = self.jwks_cache.get(kid)
        if not rsa_key_dict:
            raise InvalidTokenError(f"JWKS key {kid} not found")

        try:
            jwk = PyJWK.from_dict(rsa_key_dict)
            payload: Dict[str, Any] = jwt.decode(
                token,
                jwk.key,
                algorithms=["RS256"],
                audience=self.client_id,
                options={"verify_iss": False},
            )
        except ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except PyJWTError as e:
            raise InvalidTokenError(f"Invalid token: {str(e)}") from e

        # PyJWT checks a single issuer; Google uses two spellings
        if payload.get("iss") not in GOOGLE_ISSUERS:
            raise InvalidTokenError(f"Unexpected issuer: {payload.get('iss')}")

        return payload

    def _profile_from_claims(self, claims: Dict[str, Any]) -> VerifiedProfile:
        subject = str(claims.get("sub") or "").strip()
        email = str(claims.get("email") or "").strip()

        if not subject:
            raise InvalidTokenError("Token missing 'sub' claim")
        if not email:
            raise InvalidTokenError("Token missing 'email' claim")
        if not is_valid_email(email):
            raise InvalidTokenError(f"Token email claim is malformed: {email!r}")
        if claims.get("email_verified") is False:
            raise InvalidTokenError("Email address is not verified")

        name = str(claims.get("name") or "").strip() or email
        return VerifiedProfile(provider_id=subject, name=name, email=email)

    async def _refresh_jwks(self) -> None:
        """Refresh JWKS from Google certs endpoint.

        Raises:
            JWKSError: If JWKS fetching fails
        """
        try:
            async with aiohttp.ClientSession() as session:
                timeout = aiohttp.ClientTimeout(total=5)
                async with session.get(self.jwks_url, timeout=timeout) as resp:
                    resp.raise_for_status()
                    jwks = await resp.json()

            for key in jwks.get("keys", []):
                kid = key.get("kid")
                if not kid:
                    continue
                self.jwks_cache[kid] = key

        except aiohttp.ClientError as e:
            raise JWKSError(f"Failed to fetch JWKS: {str(e)}") from e
        except (ValueError, AttributeError) as e:
            raise JWKSError(f"Failed to parse JWKS: {str(e)}") from e
