"""Mesh entity and its attached files."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple

# Multipart field under which mesh files are uploaded.
FIELD_NAME = "files"


@dataclass(frozen=True)
class MeshUpload:
    """A file submitted for attachment to a new mesh."""

    filename: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class MeshFile:
    """Metadata of a file stored for a mesh."""

    file_id: str
    filename: str
    content_type: str
    size: int


@dataclass(frozen=True)
class Mesh:
    """Mesh aggregate.

    Invariants:
    - name is non-blank
    - at least one file is attached
    - owner_id references the owning user's id

    Examples:
        >>> f = MeshFile("f1", "cube.fbx", "application/octet-stream", 10)
        >>> mesh = Mesh("m1", "u1", "Cube", None, None, (f,), datetime.now())
        >>> mesh.name
        'Cube'
    """

    mesh_id: str
    owner_id: str
    name: str
    short_desc: Optional[str]
    long_desc: Optional[str]
    files: Tuple[MeshFile, ...] = field(default_factory=tuple)
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if not (self.name or "").strip():
            raise ValueError("Mesh name cannot be empty")
        if not self.files:
            raise ValueError("Mesh must have at least one file")
