"""User repository factory for environment-based selection.

This factory creates the user store implementation based on the
USER_REPOSITORY environment variable and wraps it in a UserRepository:
- "inmemory": InMemoryUserStore (for testing)
- "mongodb": MongoUserStore (for production)

Default: inmemory

The MongoDB database is injected by the caller (created once at startup);
nothing here caches instances.
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.ports.user_store import IUserStore
from infrastructure.config import get_repository_backend
from infrastructure.user.in_memory_user_store import InMemoryUserStore
from infrastructure.user.mongo_user_store import MongoUserStore
from infrastructure.user.user_repository import UserRepository


def create_user_store(database: Optional[AsyncIOMotorDatabase] = None) -> IUserStore:
    """Create user store based on environment configuration.

    Args:
        database: Motor database, required when USER_REPOSITORY=mongodb

    Returns:
        IUserStore: The configured store implementation

    Raises:
        ValueError: If mongodb is selected without a database
    """
    backend = get_repository_backend("USER_REPOSITORY")

    if backend == "mongodb":
        if database is None:
            raise ValueError("A MongoDB database is required when USER_REPOSITORY=mongodb")
        return MongoUserStore(database)

    return InMemoryUserStore()


def create_user_repository(database: Optional[AsyncIOMotorDatabase] = None) -> IUserRepository:
    """Create the user repository over the configured store."""
    return UserRepository(create_user_store(database))
