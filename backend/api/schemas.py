"""API response and request models."""

from datetime import datetime
from typing import Collection, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from domain.mesh.core.entities.mesh import Mesh, MeshFile
from domain.user.core.entities.user import User


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GoogleProfileResponse(_CamelModel):
    id: str
    name: str
    email: str


class UserResponse(_CamelModel):
    """Serialized user; ``name`` and ``email`` are derived from ``google``."""

    id: str
    google: GoogleProfileResponse
    created: datetime
    name: str
    email: str
    is_privileged: bool = False

    @classmethod
    def from_entity(
        cls, user: User, privileged_emails: Optional[Collection[str]] = None
    ) -> "UserResponse":
        return cls(
            id=str(user.user_id),
            google=GoogleProfileResponse(
                id=user.identity.provider_id,
                name=user.identity.name,
                email=user.identity.email,
            ),
            created=user.created_at,
            name=user.name,
            email=user.email,
            is_privileged=user.is_privileged(privileged_emails),
        )


class CreateUserRequest(BaseModel):
    id_token: str = ""


class MeshFileResponse(_CamelModel):
    file_id: str
    filename: str
    content_type: str
    size: int

    @classmethod
    def from_entity(cls, mesh_file: MeshFile) -> "MeshFileResponse":
        return cls(
            file_id=mesh_file.file_id,
            filename=mesh_file.filename,
            content_type=mesh_file.content_type,
            size=mesh_file.size,
        )


class MeshResponse(_CamelModel):
    id: str
    owner: str
    name: str
    short_desc: Optional[str] = None
    long_desc: Optional[str] = None
    files: List[MeshFileResponse]
    created: Optional[datetime] = None

    @classmethod
    def from_entity(cls, mesh: Mesh) -> "MeshResponse":
        return cls(
            id=mesh.mesh_id,
            owner=mesh.owner_id,
            name=mesh.name,
            short_desc=mesh.short_desc,
            long_desc=mesh.long_desc,
            files=[MeshFileResponse.from_entity(f) for f in mesh.files],
            created=mesh.created_at,
        )


class ErrorResponse(BaseModel):
    """Response model for service errors."""

    error: str
    message: str
