"""Mesh repository factory for environment-based selection.

Selects the implementation from MESH_REPOSITORY:
- "inmemory": InMemoryMeshRepository (default, testing)
- "mongodb": MongoMeshRepository (production)
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from domain.mesh.core.ports.mesh_repository import IMeshRepository
from infrastructure.config import get_repository_backend
from infrastructure.mesh.in_memory_mesh_repository import InMemoryMeshRepository
from infrastructure.mesh.mongo_mesh_repository import MongoMeshRepository


def create_mesh_repository(database: Optional[AsyncIOMotorDatabase] = None) -> IMeshRepository:
    """Create mesh repository based on environment configuration.

    Raises:
        ValueError: If mongodb is selected without a database
    """
    backend = get_repository_backend("MESH_REPOSITORY")

    if backend == "mongodb":
        if database is None:
            raise ValueError("A MongoDB database is required when MESH_REPOSITORY=mongodb")
        return MongoMeshRepository(database)

    return InMemoryMeshRepository()
