"""FastAPI dependencies resolving services from application state."""

from typing import FrozenSet, Optional

from fastapi import Depends, Path, Request

from application.user.service import UserService
from domain.mesh.core.ports.mesh_repository import IMeshRepository
from domain.user.core.entities.user import User


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service


def get_mesh_repository(request: Request) -> IMeshRepository:
    return request.app.state.mesh_repository


def get_privileged_emails(request: Request) -> FrozenSet[str]:
    return request.app.state.privileged_emails


async def load_user(
    user_id: str = Path(...),
    service: UserService = Depends(get_user_service),
) -> User:
    """Load the user named in the path, or fail with 404."""
    return await service.get(user_id)


def extract_bearer_token(auth_header: Optional[str]) -> Optional[str]:
    """Extract Bearer token from Authorization header.

    Args:
        auth_header: Authorization header value

    Returns:
        Token or None

    Examples:
        >>> extract_bearer_token("Bearer eyJ...")
        'eyJ...'
        >>> extract_bearer_token("eyJ...")  # Missing Bearer
    """
    if not auth_header:
        return None

    parts = auth_header.split(None, 1)

    if len(parts) != 2:
        return None

    scheme, token = parts

    if scheme.lower() != "bearer" or not token.strip():
        return None

    return token.strip()
