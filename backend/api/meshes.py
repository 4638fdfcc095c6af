"""Mesh REST endpoints."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from api.dependencies import get_mesh_repository, load_user
from api.schemas import ErrorResponse, MeshResponse
from application.mesh.commands.create_mesh import CreateMeshCommand
from application.mesh.queries.get_mesh import GetMeshQuery
from domain.mesh.core.entities.mesh import MeshUpload
from domain.mesh.core.ports.mesh_repository import IMeshRepository
from domain.user.core.entities.user import User

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["meshes"],
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


async def _read_uploads(files: Optional[List[UploadFile]]) -> List[MeshUpload]:
    uploads = []
    for upload in files or []:
        data = await upload.read()
        uploads.append(
            MeshUpload(
                filename=upload.filename or "",
                content_type=upload.content_type or "application/octet-stream",
                data=data,
            )
        )
    return uploads


@router.post(
    "/users/{user_id}/meshes",
    response_model=MeshResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_mesh(
    owner: User = Depends(load_user),
    name: str = Form(default=""),
    short_desc: Optional[str] = Form(default=None, alias="shortDesc"),
    long_desc: Optional[str] = Form(default=None, alias="longDesc"),
    files: Optional[List[UploadFile]] = File(default=None),
    repository: IMeshRepository = Depends(get_mesh_repository),
) -> MeshResponse:
    """Create a mesh for the user from a multipart upload.

    Files are sent under the ``files`` field; ``name`` is required.
    """
    uploads = await _read_uploads(files)
    mesh = await CreateMeshCommand(repository).execute(owner, name, short_desc, long_desc, uploads)
    logger.info(f"created mesh '{mesh.mesh_id}' for user '{owner.user_id}'")
    return MeshResponse.from_entity(mesh)


@router.get("/users/{user_id}/meshes", response_model=List[MeshResponse])
async def list_user_meshes(
    owner: User = Depends(load_user),
    repository: IMeshRepository = Depends(get_mesh_repository),
) -> List[MeshResponse]:
    meshes = await GetMeshQuery(repository).by_owner(str(owner.user_id))
    return [MeshResponse.from_entity(m) for m in meshes]


@router.get("/meshes/{mesh_id}", response_model=MeshResponse)
async def get_mesh(
    mesh_id: str,
    repository: IMeshRepository = Depends(get_mesh_repository),
) -> MeshResponse:
    mesh = await GetMeshQuery(repository).by_id(mesh_id)
    return MeshResponse.from_entity(mesh)
