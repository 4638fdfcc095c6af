"""Unit test configuration.

Unit tests build their collaborators directly and never load app.py.
"""

from __future__ import annotations

import pytest

from application.user.service import UserService
from infrastructure.user.in_memory_user_store import InMemoryUserStore
from infrastructure.user.json_profile_verifier import JsonProfileVerifier
from infrastructure.user.user_repository import UserRepository


@pytest.fixture
def store() -> InMemoryUserStore:
    """Fresh in-memory user store."""
    return InMemoryUserStore()


@pytest.fixture
def repository(store: InMemoryUserStore) -> UserRepository:
    return UserRepository(store)


@pytest.fixture
def verifier() -> JsonProfileVerifier:
    return JsonProfileVerifier()


@pytest.fixture
def service(verifier: JsonProfileVerifier, repository: UserRepository) -> UserService:
    return UserService(verifier=verifier, repository=repository)
