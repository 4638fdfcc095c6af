"""In-memory User store for testing."""

import copy
from typing import Any, Dict, Optional

from domain.shared.storage import StorageError, StorageErrorKind
from domain.user.core.ports.user_store import IUserStore
from domain.user.core.value_objects.user_id import UserId


class InMemoryUserStore(IUserStore):
    """In-memory implementation of the user store for testing.

    Keeps documents keyed by id plus an email index that plays the role of
    MongoDB's unique index. Check and insert run without an ``await`` in
    between, so they are atomic on a single event loop.

    Examples:
        >>> store = InMemoryUserStore()
        >>> doc = await store.insert_one({"google": {...}, "created": now})
        >>> await store.find_by_id(doc["_id"])
    """

    def __init__(self) -> None:
        """Initialize empty in-memory storage."""
        self._documents: Dict[str, Dict[str, Any]] = {}
        self._email_index: Dict[str, str] = {}

    async def insert_one(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """Insert user document, enforcing unique google.email."""
        try:
            email = document["google"]["email"]
        except (KeyError, TypeError) as e:
            raise StorageError(StorageErrorKind.OTHER, "insert_one", "missing google.email") from e

        if email in self._email_index:
            raise StorageError(
                StorageErrorKind.DUPLICATE_KEY,
                "insert_one",
                f"duplicate key google.email: {email}",
            )

        user_id = str(UserId.generate())
        stored = copy.deepcopy(document)
        stored["_id"] = user_id
        self._documents[user_id] = stored
        self._email_index[email] = user_id
        return copy.deepcopy(stored)

    async def find_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Find user document by id."""
        document = self._documents.get(user_id)
        return copy.deepcopy(document) if document is not None else None

    async def delete_by_id(self, user_id: str) -> None:
        """Delete user document by id."""
        document = self._documents.pop(user_id, None)
        if document is None:
            raise StorageError(StorageErrorKind.NOT_FOUND, "delete_one", user_id)
        self._email_index.pop(document["google"]["email"], None)

    def clear(self) -> None:
        """Clear all users from memory.

        Useful for test cleanup.
        """
        self._documents.clear()
        self._email_index.clear()

    def count(self) -> int:
        """Get total number of users in memory."""
        return len(self._documents)
