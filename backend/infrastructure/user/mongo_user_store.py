"""MongoDB User store implementation."""

from typing import Any, Dict, Optional

from domain.shared.storage import StorageError, StorageErrorKind
from domain.user.core.ports.user_store import IUserStore
from infrastructure.persistence.mongodb.base import MongoBaseStore
from infrastructure.user.user_schema import USERS_COLLECTION


class MongoUserStore(MongoBaseStore, IUserStore):
    """MongoDB implementation of the user store.

    Relies on the unique index on ``google.email`` created by
    ``register_user_schema``; a duplicate insert surfaces as a
    DUPLICATE_KEY StorageError.

    Examples:
        >>> store = MongoUserStore(db)
        >>> doc = await store.insert_one(document)
        >>> found = await store.find_by_id(doc["_id"])
    """

    @property
    def collection_name(self) -> str:
        """MongoDB collection name."""
        return USERS_COLLECTION

    async def insert_one(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """Insert user document and return it with its assigned id."""
        to_insert = dict(document)
        inserted_id = await self._insert_one(to_insert)
        stored = dict(document)
        stored["_id"] = inserted_id
        return stored

    async def find_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Find user document by id; malformed ids match nothing."""
        object_id = self.to_object_id(user_id)
        if object_id is None:
            return None
        return await self._find_one({"_id": object_id})

    async def delete_by_id(self, user_id: str) -> None:
        """Delete user document by id."""
        object_id = self.to_object_id(user_id)
        if object_id is None:
            raise StorageError(StorageErrorKind.NOT_FOUND, "delete_one", f"invalid id {user_id}")
        await self._delete_one({"_id": object_id})
