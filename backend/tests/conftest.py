"""Shared test fixtures.

Unit tests in tests/unit/ build their collaborators directly; API tests in
tests/integration/ run the full FastAPI app with in-memory stores and the
JSON profile verifier.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import AsyncIterator, Dict

import pytest
import pytest_asyncio
from dotenv import load_dotenv
from httpx import ASGITransport, AsyncClient

# Load .env.test for local overrides (never required)
env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=True)


@dataclass(frozen=True)
class TestUser:
    """A test user and its fake identity token.

    The token is the serialized profile, as accepted by JsonProfileVerifier.
    """

    __test__ = False

    auth: Dict[str, str]

    @property
    def id_token(self) -> str:
        return json.dumps(self.auth)


TEST_USER_ONE = TestUser(auth={"id": "123456789", "name": "Test User 1", "email": "test1@test.com"})
TEST_USER_TWO = TestUser(auth={"id": "987654321", "name": "Test User 2", "email": "test2@test.com"})

# A well-formed id that is never assigned
INVALID_ID = "5b52594de29d171ae09642da"

CUBE_FBX = b"; FBX 7.4.0 project file\nObjects:  {\n  Geometry: \"Cube\", \"Mesh\" {}\n}\n"


@pytest.fixture
def user_one() -> TestUser:
    return TEST_USER_ONE


@pytest.fixture
def user_two() -> TestUser:
    return TEST_USER_TWO


@pytest.fixture
def invalid_id() -> str:
    return INVALID_ID


@pytest.fixture
def cube_fbx() -> bytes:
    return CUBE_FBX


@pytest.fixture
def api_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Configure the app for in-memory stores and JSON profile tokens."""
    monkeypatch.setenv("USER_REPOSITORY", "inmemory")
    monkeypatch.setenv("MESH_REPOSITORY", "inmemory")
    monkeypatch.setenv("IDENTITY_PROVIDER", "json")
    monkeypatch.setenv("PRIVILEGED_EMAILS", "test1@test.com")
    monkeypatch.delenv("MONGODB_URI", raising=False)


@pytest.fixture
def app(api_env: None):
    from app import create_app

    return create_app()


@pytest_asyncio.fixture
async def client(app) -> AsyncIterator[AsyncClient]:
    """Async HTTP client bound to the app via ASGITransport."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac
