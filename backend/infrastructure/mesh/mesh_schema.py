"""Mesh document schema for the meshes collection.

Document shape::

    {
        "_id": ObjectId,
        "owner": "<user id>",
        "name": str,
        "shortDesc": str | None,
        "longDesc": str | None,
        "files": [{"fileId": str, "filename": str, "contentType": str, "size": int}],
        "created": datetime,
    }
"""

from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from motor.motor_asyncio import AsyncIOMotorDatabase
from werkzeug.utils import secure_filename

from domain.mesh.core.entities.mesh import Mesh, MeshFile

MESHES_COLLECTION = "meshes"
MESH_FILES_BUCKET = "meshFiles"


def safe_filename(filename: str) -> str:
    """Sanitize an uploaded filename for storage."""
    return secure_filename(filename or "") or "mesh"


def to_document(
    owner_id: str,
    name: str,
    short_desc: Optional[str],
    long_desc: Optional[str],
    files: Sequence[MeshFile],
    created: datetime,
) -> Dict[str, Any]:
    return {
        "owner": owner_id,
        "name": name,
        "shortDesc": short_desc,
        "longDesc": long_desc,
        "files": [
            {
                "fileId": f.file_id,
                "filename": f.filename,
                "contentType": f.content_type,
                "size": f.size,
            }
            for f in files
        ],
        "created": created,
    }


def from_document(document: Dict[str, Any]) -> Mesh:
    """Convert a stored document (``_id`` as str) to a Mesh entity."""
    return Mesh(
        mesh_id=str(document["_id"]),
        owner_id=str(document["owner"]),
        name=document["name"],
        short_desc=document.get("shortDesc"),
        long_desc=document.get("longDesc"),
        files=tuple(
            MeshFile(
                file_id=str(f["fileId"]),
                filename=f["filename"],
                content_type=f["contentType"],
                size=int(f["size"]),
            )
            for f in document.get("files", [])
        ),
        created_at=document.get("created"),
    )


async def register_mesh_schema(database: AsyncIOMotorDatabase) -> None:
    """Create the meshes collection indexes."""
    collection = database[MESHES_COLLECTION]
    await collection.create_index([("owner", 1), ("created", 1)], name="idx_owner_created")
