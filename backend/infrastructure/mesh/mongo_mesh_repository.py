"""MongoDB Mesh repository with GridFS file storage."""

import io
import logging
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from motor.motor_asyncio import AsyncIOMotorDatabase, AsyncIOMotorGridFSBucket
from pymongo.errors import PyMongoError

from domain.mesh.core.entities.mesh import Mesh, MeshFile, MeshUpload
from domain.mesh.core.exceptions.mesh_errors import MeshCreationError, MeshNotFoundError
from domain.mesh.core.ports.mesh_repository import IMeshRepository
from domain.shared.errors import InternalError
from domain.shared.storage import StorageError
from domain.user.core.entities.user import User
from infrastructure.mesh.mesh_schema import (
    MESH_FILES_BUCKET,
    MESHES_COLLECTION,
    from_document,
    safe_filename,
    to_document,
)
from infrastructure.persistence.mongodb.base import MongoBaseStore

logger = logging.getLogger(__name__)


class MongoMeshRepository(MongoBaseStore, IMeshRepository):
    """MongoDB implementation of the mesh repository.

    Storage Strategy:
    - Each Mesh is a single document in ``meshes``
    - File bytes live in the GridFS bucket ``meshFiles``; the mesh document
      embeds their metadata
    - If the mesh document cannot be written, already uploaded files are
      deleted again
    """

    def __init__(self, database: AsyncIOMotorDatabase) -> None:
        super().__init__(database)
        self._bucket = AsyncIOMotorGridFSBucket(database, bucket_name=MESH_FILES_BUCKET)

    @property
    def collection_name(self) -> str:
        """MongoDB collection name."""
        return MESHES_COLLECTION

    async def create(
        self,
        owner: User,
        name: str,
        short_desc: Optional[str],
        long_desc: Optional[str],
        files: Sequence[MeshUpload],
    ) -> Mesh:
        logger.info(f"attempting to create mesh '{name}' for user '{owner.user_id}'")
        stored_files: List[MeshFile] = []

        try:
            for upload in files:
                filename = safe_filename(upload.filename)
                file_id = await self._bucket.upload_from_stream(
                    filename,
                    io.BytesIO(upload.data),
                    metadata={"contentType": upload.content_type, "owner": str(owner.user_id)},
                )
                stored_files.append(
                    MeshFile(
                        file_id=str(file_id),
                        filename=filename,
                        content_type=upload.content_type,
                        size=upload.size,
                    )
                )

            document = to_document(
                str(owner.user_id),
                name,
                short_desc,
                long_desc,
                stored_files,
                datetime.now(timezone.utc),
            )
            mesh_id = await self._insert_one(dict(document))
        except (PyMongoError, StorageError) as e:
            logger.error(f"error while creating mesh '{name}'. Error: {e}")
            await self._discard_files(stored_files)
            raise MeshCreationError(name) from e

        document["_id"] = mesh_id
        mesh = from_document(document)
        logger.info(f"successfully created mesh '{mesh.mesh_id}' with {len(stored_files)} file(s)")
        return mesh

    async def get_by_id(self, mesh_id: str) -> Mesh:
        object_id = self.to_object_id(mesh_id)
        if object_id is None:
            raise MeshNotFoundError(mesh_id)

        try:
            document = await self._find_one({"_id": object_id})
        except StorageError as e:
            raise InternalError(f"Unable to load mesh '{mesh_id}'") from e

        if document is None:
            raise MeshNotFoundError(mesh_id)
        return from_document(document)

    async def list_by_owner(self, owner_id: str) -> List[Mesh]:
        try:
            documents = await self._find_many({"owner": owner_id}, sort=[("created", 1)])
        except StorageError as e:
            raise InternalError(f"Unable to list meshes for user '{owner_id}'") from e
        return [from_document(doc) for doc in documents]

    async def _discard_files(self, files: Sequence[MeshFile]) -> None:
        for stored in files:
            object_id = self.to_object_id(stored.file_id)
            if object_id is None:
                continue
            try:
                await self._bucket.delete(object_id)
            except PyMongoError as e:
                logger.error(f"could not delete orphaned mesh file '{stored.file_id}': {e}")
