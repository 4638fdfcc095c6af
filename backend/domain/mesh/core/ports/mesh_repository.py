"""Mesh repository port (interface)."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from domain.mesh.core.entities.mesh import Mesh, MeshUpload
from domain.user.core.entities.user import User


class IMeshRepository(ABC):
    """Repository interface for meshes and their files."""

    @abstractmethod
    async def create(
        self,
        owner: User,
        name: str,
        short_desc: Optional[str],
        long_desc: Optional[str],
        files: Sequence[MeshUpload],
    ) -> Mesh:
        """Store the files and persist a new mesh owned by ``owner``.

        Raises:
            MeshCreationError: If files or the mesh record cannot be stored
        """
        pass

    @abstractmethod
    async def get_by_id(self, mesh_id: str) -> Mesh:
        """Get mesh by id.

        Raises:
            MeshNotFoundError: If no mesh has this id
        """
        pass

    @abstractmethod
    async def list_by_owner(self, owner_id: str) -> List[Mesh]:
        """List meshes owned by a user, oldest first."""
        pass
