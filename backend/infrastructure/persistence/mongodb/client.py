"""MongoDB client construction.

The client is created once at application startup and injected into the
stores that need it; nothing here keeps a module-level connection.
"""

import logging
from typing import Any, Dict

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from infrastructure.config import get_mongodb_database, get_mongodb_uri

logger = logging.getLogger(__name__)


def create_mongo_client() -> "AsyncIOMotorClient[Dict[str, Any]]":
    """Create a motor client from MONGODB_URI.

    Raises:
        ValueError: If MONGODB_URI is not configured
    """
    uri = get_mongodb_uri()
    if not uri:
        raise ValueError(
            "MONGODB_URI not configured. "
            "Set MONGODB_URI, MONGODB_USER, "
            "and MONGODB_PASSWORD environment variables."
        )
    client: AsyncIOMotorClient = AsyncIOMotorClient(uri, tz_aware=True)
    logger.info("MongoDB client created")
    return client


def get_database(client: AsyncIOMotorClient) -> AsyncIOMotorDatabase:
    """Return the configured database from ``client``."""
    return client[get_mongodb_database()]
