"""Base MongoDB store with reusable patterns.

Provides common functionality for all MongoDB stores:
- Collection handle from an injected database
- ObjectId <-> string conversion
- Driver error classification into StorageErrorKind
- Logging

All concrete MongoDB stores should inherit from MongoBaseStore.
"""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any, List, Tuple
import logging

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError, PyMongoError

from domain.shared.storage import StorageError, StorageErrorKind

logger = logging.getLogger(__name__)


class MongoBaseStore(ABC):
    """
    Abstract base class for MongoDB stores.

    Provides common functionality:
    - Connection pooling (motor handles this automatically)
    - ObjectId <-> string conversion for the ``_id`` field
    - Error classification: every driver failure leaves this class as a
      StorageError (DUPLICATE_KEY, NOT_FOUND or OTHER)

    Subclasses must implement:
    - collection_name: Name of MongoDB collection

    Example:
        class MongoUserStore(MongoBaseStore):
            @property
            def collection_name(self) -> str:
                return "users"
    """

    def __init__(self, database: AsyncIOMotorDatabase) -> None:
        """
        Initialize store with an injected database.

        Args:
            database: Motor database (connection owned by the caller)
        """
        self._db = database
        self._collection = database[self.collection_name]

        logger.info(
            f"Initialized {self.__class__.__name__} " f"for collection '{self.collection_name}'"
        )

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """MongoDB collection name."""
        pass

    @property
    def collection(self) -> AsyncIOMotorCollection:
        """Get MongoDB collection handle."""
        return self._collection

    @staticmethod
    def to_object_id(value: str) -> Optional[ObjectId]:
        """Convert a string id to ObjectId, or None if malformed."""
        if not ObjectId.is_valid(value):
            return None
        return ObjectId(value)

    @staticmethod
    def from_mongo(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        """Return a copy of ``doc`` with ``_id`` as a string."""
        if doc is None:
            return None
        result = dict(doc)
        if "_id" in result:
            result["_id"] = str(result["_id"])
        return result

    def classify(self, operation: str, error: Exception) -> StorageError:
        """Translate a driver exception into a StorageError."""
        if isinstance(error, DuplicateKeyError):
            return StorageError(StorageErrorKind.DUPLICATE_KEY, operation, str(error))
        return StorageError(StorageErrorKind.OTHER, operation, str(error))

    async def _find_one(self, filter_dict: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Find single document with error handling.

        Raises:
            StorageError: If MongoDB operation fails (logged)
        """
        try:
            doc = await self._collection.find_one(filter_dict)
        except PyMongoError as e:
            logger.error(
                f"Error in find_one: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise self.classify("find_one", e) from e
        return self.from_mongo(doc)

    async def _find_many(
        self,
        filter_dict: Dict[str, Any],
        sort: Optional[List[Tuple[str, int]]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Find multiple documents with error handling.

        Raises:
            StorageError: If MongoDB operation fails (logged)
        """
        try:
            cursor = self._collection.find(filter_dict)
            if sort:
                cursor = cursor.sort(sort)
            documents = await cursor.to_list(length=None)
        except PyMongoError as e:
            logger.error(
                f"Error in find_many: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise self.classify("find_many", e) from e
        return [self.from_mongo(doc) for doc in documents]

    async def _insert_one(self, document: Dict[str, Any]) -> str:
        """
        Insert single document with error handling.

        Returns:
            The assigned ``_id`` as a string

        Raises:
            StorageError: DUPLICATE_KEY on unique index violation, else OTHER
        """
        try:
            result = await self._collection.insert_one(document)
        except PyMongoError as e:
            logger.error(f"Error in insert_one: collection={self.collection_name}, " f"error={e}")
            raise self.classify("insert_one", e) from e
        return str(result.inserted_id)

    async def _delete_one(self, filter_dict: Dict[str, Any]) -> None:
        """
        Delete single document with error handling.

        Raises:
            StorageError: NOT_FOUND if no document matched, OTHER on failure
        """
        try:
            result = await self._collection.delete_one(filter_dict)
        except PyMongoError as e:
            logger.error(
                f"Error in delete_one: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise self.classify("delete_one", e) from e

        if result.deleted_count == 0:
            raise StorageError(StorageErrorKind.NOT_FOUND, "delete_one", str(filter_dict))
