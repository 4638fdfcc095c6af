"""In-memory Mesh repository for testing."""

from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

from bson import ObjectId

from domain.mesh.core.entities.mesh import Mesh, MeshFile, MeshUpload
from domain.mesh.core.exceptions.mesh_errors import MeshNotFoundError
from domain.mesh.core.ports.mesh_repository import IMeshRepository
from domain.user.core.entities.user import User
from infrastructure.mesh.mesh_schema import safe_filename


class InMemoryMeshRepository(IMeshRepository):
    """In-memory implementation of the mesh repository.

    Keeps mesh entities and raw file bytes in dictionaries.
    """

    def __init__(self) -> None:
        self._meshes: Dict[str, Mesh] = {}
        self._files: Dict[str, bytes] = {}

    async def create(
        self,
        owner: User,
        name: str,
        short_desc: Optional[str],
        long_desc: Optional[str],
        files: Sequence[MeshUpload],
    ) -> Mesh:
        stored_files = []
        for upload in files:
            file_id = str(ObjectId())
            self._files[file_id] = upload.data
            stored_files.append(
                MeshFile(
                    file_id=file_id,
                    filename=safe_filename(upload.filename),
                    content_type=upload.content_type,
                    size=upload.size,
                )
            )

        mesh = Mesh(
            mesh_id=str(ObjectId()),
            owner_id=str(owner.user_id),
            name=name,
            short_desc=short_desc,
            long_desc=long_desc,
            files=tuple(stored_files),
            created_at=datetime.now(timezone.utc),
        )
        self._meshes[mesh.mesh_id] = mesh
        return mesh

    async def get_by_id(self, mesh_id: str) -> Mesh:
        mesh = self._meshes.get(mesh_id)
        if mesh is None:
            raise MeshNotFoundError(mesh_id)
        return mesh

    async def list_by_owner(self, owner_id: str) -> List[Mesh]:
        return [m for m in self._meshes.values() if m.owner_id == owner_id]

    def file_data(self, file_id: str) -> Optional[bytes]:
        """Raw bytes of a stored file (tests only)."""
        return self._files.get(file_id)

    def clear(self) -> None:
        self._meshes.clear()
        self._files.clear()
