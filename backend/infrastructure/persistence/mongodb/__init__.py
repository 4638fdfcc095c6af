"""MongoDB store implementations."""

from .base import MongoBaseStore
from .client import create_mongo_client, get_database

__all__ = [
    "MongoBaseStore",
    "create_mongo_client",
    "get_database",
]
