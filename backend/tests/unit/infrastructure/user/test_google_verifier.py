"""Unit tests for GoogleIdentityVerifier with mocked HTTP calls."""

import os
import pytest
from unittest.mock import AsyncMock, patch, MagicMock

from domain.shared.errors import InternalError, UnauthorizedError
from domain.user.auth.ports.identity_verifier import InvalidTokenError, JWKSError
from infrastructure.user.google_verifier import GoogleIdentityVerifier

VALID_CLAIMS = {
    "iss": "https://accounts.google.com",
    "aud": "client-id.apps.googleusercontent.com",
    "sub": "123456789",
    "email": "test1@test.com",
    "email_verified": True,
    "name": "Test User 1",
    "exp": 9999999999,
    "iat": 1234567890,
}


class TestGoogleIdentityVerifier:
    """Test GoogleIdentityVerifier implementation with mocked dependencies."""

    @pytest.fixture
    def google(self):
        """Create GoogleIdentityVerifier with test config."""
        verifier = GoogleIdentityVerifier(client_id="client-id.apps.googleusercontent.com")
        verifier.jwks_cache["test_kid"] = {"kty": "RSA", "kid": "test_kid"}
        return verifier

    def _patched_decode(self, claims=None, side_effect=None):
        """Patch header/JWK/decode; returns the context managers."""
        header = patch(
            "infrastructure.user.google_verifier.jwt.get_unverified_header",
            return_value={"kid": "test_kid"},
        )
        pyjwk = patch("infrastructure.user.google_verifier.PyJWK")
        decode = patch(
            "infrastructure.user.google_verifier.jwt.decode",
            return_value=claims,
            side_effect=side_effect,
        )
        return header, pyjwk, decode

    def test_init_with_env_vars(self):
        """Test initialization from environment variables."""
        with patch.dict("os.environ", {"GOOGLE_CLIENT_ID": "env-client-id"}):
            verifier = GoogleIdentityVerifier()
            assert verifier.client_id == "env-client-id"

    def test_init_without_client_id_raises_error(self):
        """Test that missing client id raises ValueError."""
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="GOOGLE_CLIENT_ID is required"):
                GoogleIdentityVerifier()

    @pytest.mark.asyncio
    async def test_verify_success(self, google):
        """Test successful token verification."""
        header, pyjwk, decode = self._patched_decode(claims=dict(VALID_CLAIMS))
        with header, pyjwk as mock_pyjwk, decode as mock_decode:
            mock_jwk_instance = MagicMock()
            mock_jwk_instance.key = "mock_key"
            mock_pyjwk.from_dict.return_value = mock_jwk_instance

            profile = await google.verify("test_token")

            assert profile.provider_id == "123456789"
            assert profile.name == "Test User 1"
            assert profile.email == "test1@test.com"
            _, kwargs = mock_decode.call_args
            assert kwargs["audience"] == "client-id.apps.googleusercontent.com"
            assert kwargs["algorithms"] == ["RS256"]

    @pytest.mark.asyncio
    async def test_verify_accepts_bare_issuer(self, google):
        claims = dict(VALID_CLAIMS, iss="accounts.google.com")
        header, pyjwk, decode = self._patched_decode(claims=claims)
        with header, pyjwk, decode:
            profile = await google.verify("test_token")

        assert profile.email == "test1@test.com"

    @pytest.mark.asyncio
    async def test_verify_rejects_foreign_issuer(self, google):
        claims = dict(VALID_CLAIMS, iss="https://evil.example.com")
        header, pyjwk, decode = self._patched_decode(claims=claims)
        with header, pyjwk, decode:
            with pytest.raises(InvalidTokenError, match="Unexpected issuer"):
                await google.verify("test_token")

    @pytest.mark.asyncio
    async def test_name_falls_back_to_email(self, google):
        claims = dict(VALID_CLAIMS)
        del claims["name"]
        header, pyjwk, decode = self._patched_decode(claims=claims)
        with header, pyjwk, decode:
            profile = await google.verify("test_token")

        assert profile.name == "test1@test.com"

    @pytest.mark.asyncio
    async def test_missing_email_is_rejected(self, google):
        claims = dict(VALID_CLAIMS)
        del claims["email"]
        header, pyjwk, decode = self._patched_decode(claims=claims)
        with header, pyjwk, decode:
            with pytest.raises(InvalidTokenError, match="email"):
                await google.verify("test_token")

    @pytest.mark.asyncio
    async def test_malformed_email_is_rejected(self, google):
        claims = dict(VALID_CLAIMS, email="not-an-email")
        header, pyjwk, decode = self._patched_decode(claims=claims)
        with header, pyjwk, decode:
            with pytest.raises(InvalidTokenError, match="malformed"):
                await google.verify("test_token")

    @pytest.mark.asyncio
    async def test_unverified_email_is_rejected(self, google):
        claims = dict(VALID_CLAIMS, email_verified=False)
        header, pyjwk, decode = self._patched_decode(claims=claims)
        with header, pyjwk, decode:
            with pytest.raises(InvalidTokenError, match="not verified"):
                await google.verify("test_token")

    @pytest.mark.asyncio
    async def test_verify_expired(self, google):
        """Test token verification fails for expired token."""
        from jwt.exceptions import ExpiredSignatureError

        header, pyjwk, decode = self._patched_decode(
            side_effect=ExpiredSignatureError("Token expired")
        )
        with header, pyjwk, decode:
            with pytest.raises(InvalidTokenError, match="expired") as exc_info:
                await google.verify("test_token")

        assert isinstance(exc_info.value, UnauthorizedError)

    @pytest.mark.asyncio
    async def test_verify_missing_kid(self, google):
        """Test token verification fails when kid is missing."""
        with patch(
            "infrastructure.user.google_verifier.jwt.get_unverified_header", return_value={}
        ):
            with pytest.raises(InvalidTokenError, match="missing 'kid'"):
                await google.verify("test_token")

    @pytest.mark.asyncio
    async def test_verify_garbage_token(self, google):
        with pytest.raises(InvalidTokenError, match="Malformed"):
            await google.verify("definitely-not-a-jwt")

    @pytest.mark.asyncio
    async def test_verify_empty_token(self, google):
        with pytest.raises(InvalidTokenError, match="empty"):
            await google.verify("   ")

    @pytest.mark.asyncio
    async def test_unknown_kid_triggers_refresh(self, google):
        with patch(
            "infrastructure.user.google_verifier.jwt.get_unverified_header",
            return_value={"kid": "rotated_kid"},
        ):
            with patch.object(google, "_refresh_jwks", AsyncMock()) as mock_refresh:
                with pytest.raises(InvalidTokenError, match="rotated_kid not found"):
                    await google.verify("test_token")

        mock_refresh.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_refresh_jwks_success(self, google):
        """Test successful JWKS refresh."""
        mock_jwks = {
            "keys": [
                {
                    "kid": "test_kid_1",
                    "kty": "RSA",
                    "use": "sig",
                    "n": "test_n",
                    "e": "AQAB",
                },
                {"kty": "RSA"},
            ]
        }

        mock_response = AsyncMock()
        mock_response.raise_for_status = MagicMock()
        mock_response.json = AsyncMock(return_value=mock_jwks)
        mock_response.__aenter__ = AsyncMock(return_value=mock_response)
        mock_response.__aexit__ = AsyncMock(return_value=None)

        mock_get = AsyncMock(return_value=mock_response)
        mock_get.__aenter__ = AsyncMock(return_value=mock_response)
        mock_get.__aexit__ = AsyncMock(return_value=None)

        mock_session = AsyncMock()
        mock_session.get = MagicMock(return_value=mock_get)
        mock_session.__aenter__ = AsyncMock(return_value=mock_session)
        mock_session.__aexit__ = AsyncMock(return_value=None)

        with patch("aiohttp.ClientSession", return_value=mock_session):
            await google._refresh_jwks()

            assert "test_kid_1" in google.jwks_cache
            assert google.jwks_cache["test_kid_1"]["kty"] == "RSA"
            mock_session.get.assert_called_once()
            assert mock_session.get.call_args[0][0] == google.jwks_url

    @pytest.mark.asyncio
    async def test_refresh_jwks_network_error(self, google):
        """Test JWKS refresh handles network errors."""
        import aiohttp

        mock_session = AsyncMock()
        mock_session.get = MagicMock(side_effect=aiohttp.ClientError("Connection failed"))
        mock_session.__aenter__ = AsyncMock(return_value=mock_session)
        mock_session.__aexit__ = AsyncMock(return_value=None)

        with patch("aiohttp.ClientSession", return_value=mock_session):
            with pytest.raises(JWKSError, match="Failed to fetch JWKS") as exc_info:
                await google._refresh_jwks()

        assert isinstance(exc_info.value, InternalError)
        assert exc_info.value.is_public is False
