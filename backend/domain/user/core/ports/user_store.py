"""User store port (interface)."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class IUserStore(ABC):
    """Document-level store for user records.

    Implementations own the connection to a concrete store and classify
    their own failures by raising ``StorageError`` with a
    ``StorageErrorKind``. They never raise driver-specific exceptions.

    Document shape::

        {
            "_id": "<store id>",
            "google": {"id": str, "name": str, "email": str},
            "created": datetime,
        }

    The store must enforce uniqueness of ``google.email`` atomically.
    """

    @abstractmethod
    async def insert_one(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a new user document.

        Args:
            document: Document without ``_id``

        Returns:
            The stored document including its assigned ``_id`` (as str)

        Raises:
            StorageError: DUPLICATE_KEY on email conflict, OTHER otherwise
        """
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Find a user document by id.

        Returns:
            The document (``_id`` as str) or None if absent

        Raises:
            StorageError: OTHER if the lookup itself fails
        """
        pass

    @abstractmethod
    async def delete_by_id(self, user_id: str) -> None:
        """Delete a user document by id.

        Raises:
            StorageError: NOT_FOUND if nothing was deleted, OTHER otherwise
        """
        pass
