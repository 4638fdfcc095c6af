"""Mesh queries."""

from dataclasses import dataclass
from typing import List

from domain.mesh.core.entities.mesh import Mesh
from domain.mesh.core.ports.mesh_repository import IMeshRepository


@dataclass
class GetMeshQuery:
    """Read-only access to meshes."""

    repository: IMeshRepository

    async def by_id(self, mesh_id: str) -> Mesh:
        return await self.repository.get_by_id(mesh_id)

    async def by_owner(self, owner_id: str) -> List[Mesh]:
        return await self.repository.list_by_owner(owner_id)
