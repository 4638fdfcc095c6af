"""Unit tests for MongoUserStore with a mocked motor collection."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError, PyMongoError

from domain.shared.storage import StorageError, StorageErrorKind
from infrastructure.user.mongo_user_store import MongoUserStore


@pytest.fixture
def collection():
    return MagicMock()


@pytest.fixture
def mongo_store(collection):
    database = MagicMock()
    database.__getitem__.return_value = collection
    return MongoUserStore(database)


def _document():
    return {
        "google": {"id": "123", "name": "Test User 1", "email": "test1@test.com"},
        "created": datetime.now(timezone.utc),
    }


class TestMongoUserStore:
    def test_collection_name(self, mongo_store):
        assert mongo_store.collection_name == "users"

    @pytest.mark.asyncio
    async def test_insert_returns_document_with_string_id(self, mongo_store, collection):
        object_id = ObjectId()
        collection.insert_one = AsyncMock(return_value=MagicMock(inserted_id=object_id))

        stored = await mongo_store.insert_one(_document())

        assert stored["_id"] == str(object_id)
        assert stored["google"]["email"] == "test1@test.com"
        collection.insert_one.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_duplicate_key_is_classified(self, mongo_store, collection):
        collection.insert_one = AsyncMock(
            side_effect=DuplicateKeyError("E11000 duplicate key error", 11000)
        )

        with pytest.raises(StorageError) as exc_info:
            await mongo_store.insert_one(_document())

        assert exc_info.value.kind is StorageErrorKind.DUPLICATE_KEY
        assert isinstance(exc_info.value.__cause__, DuplicateKeyError)

    @pytest.mark.asyncio
    async def test_other_driver_errors_are_classified(self, mongo_store, collection):
        collection.insert_one = AsyncMock(side_effect=PyMongoError("connection reset"))

        with pytest.raises(StorageError) as exc_info:
            await mongo_store.insert_one(_document())

        assert exc_info.value.kind is StorageErrorKind.OTHER

    @pytest.mark.asyncio
    async def test_find_by_id_converts_object_id(self, mongo_store, collection):
        object_id = ObjectId()
        collection.find_one = AsyncMock(return_value={"_id": object_id, **_document()})

        found = await mongo_store.find_by_id(str(object_id))

        assert found["_id"] == str(object_id)
        collection.find_one.assert_awaited_once_with({"_id": object_id})

    @pytest.mark.asyncio
    async def test_find_by_malformed_id_skips_query(self, mongo_store, collection):
        collection.find_one = AsyncMock()

        assert await mongo_store.find_by_id("not-an-id") is None
        collection.find_one.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_find_missing_returns_none(self, mongo_store, collection):
        collection.find_one = AsyncMock(return_value=None)

        assert await mongo_store.find_by_id(str(ObjectId())) is None

    @pytest.mark.asyncio
    async def test_delete_by_id(self, mongo_store, collection):
        object_id = ObjectId()
        collection.delete_one = AsyncMock(return_value=MagicMock(deleted_count=1))

        await mongo_store.delete_by_id(str(object_id))

        collection.delete_one.assert_awaited_once_with({"_id": object_id})

    @pytest.mark.asyncio
    async def test_delete_nothing_is_not_found(self, mongo_store, collection):
        collection.delete_one = AsyncMock(return_value=MagicMock(deleted_count=0))

        with pytest.raises(StorageError) as exc_info:
            await mongo_store.delete_by_id(str(ObjectId()))

        assert exc_info.value.kind is StorageErrorKind.NOT_FOUND

    @pytest.mark.asyncio
    async def test_delete_malformed_id_is_not_found(self, mongo_store):
        with pytest.raises(StorageError) as exc_info:
            await mongo_store.delete_by_id("bogus")

        assert exc_info.value.kind is StorageErrorKind.NOT_FOUND
