"""Create mesh command."""

from dataclasses import dataclass
from typing import Optional, Sequence

from domain.mesh.core.entities.mesh import Mesh, MeshUpload
from domain.mesh.core.exceptions.mesh_errors import MeshValidationError
from domain.mesh.core.ports.mesh_repository import IMeshRepository
from domain.user.core.entities.user import User


def _optional_text(value: Optional[str]) -> Optional[str]:
    text = (value or "").strip()
    return text or None


@dataclass
class CreateMeshCommand:
    """Command to create a mesh owned by a loaded user.

    Examples:
        >>> command = CreateMeshCommand(mesh_repository)
        >>> mesh = await command.execute(owner, "Cube", None, None, [upload])
    """

    repository: IMeshRepository

    async def execute(
        self,
        owner: User,
        name: str,
        short_desc: Optional[str],
        long_desc: Optional[str],
        files: Sequence[MeshUpload],
    ) -> Mesh:
        """Validate input and create the mesh.

        Raises:
            MeshValidationError: Name is blank, no files, or an empty file
            MeshCreationError: Storage failed
        """
        mesh_name = (name or "").strip()
        if not mesh_name:
            raise MeshValidationError("Mesh name is required")
        if not files:
            raise MeshValidationError("At least one mesh file is required")
        for upload in files:
            if upload.size == 0:
                raise MeshValidationError(f"Mesh file '{upload.filename}' is empty")

        return await self.repository.create(
            owner,
            mesh_name,
            _optional_text(short_desc),
            _optional_text(long_desc),
            list(files),
        )
