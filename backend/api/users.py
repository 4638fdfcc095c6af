"""User REST endpoints."""

import logging
from typing import FrozenSet, Optional

from fastapi import APIRouter, Body, Depends, Header, status

from api.dependencies import (
    extract_bearer_token,
    get_privileged_emails,
    get_user_service,
    load_user,
)
from api.schemas import CreateUserRequest, ErrorResponse, UserResponse
from application.user.service import UserService
from domain.user.auth.ports.identity_verifier import InvalidTokenError
from domain.user.core.entities.user import User

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/users",
    tags=["users"],
    responses={
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={401: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def create_user(
    payload: Optional[CreateUserRequest] = Body(default=None),
    authorization: Optional[str] = Header(default=None),
    service: UserService = Depends(get_user_service),
    privileged_emails: FrozenSet[str] = Depends(get_privileged_emails),
) -> UserResponse:
    """Create a user from a Google id token.

    The token is read from ``Authorization: Bearer <token>`` or, if absent,
    from the JSON body ``{"id_token": "<token>"}``.
    """
    token = extract_bearer_token(authorization)
    if token is None and payload is not None:
        token = payload.id_token
    if not token:
        raise InvalidTokenError("Missing identity token")

    user = await service.create(token)
    logger.info(f"created user '{user.user_id}' with email '{user.email}'")
    return UserResponse.from_entity(user, privileged_emails)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user: User = Depends(load_user),
    privileged_emails: FrozenSet[str] = Depends(get_privileged_emails),
) -> UserResponse:
    return UserResponse.from_entity(user, privileged_emails)


@router.delete("/{user_id}", response_model=UserResponse)
async def remove_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
    privileged_emails: FrozenSet[str] = Depends(get_privileged_emails),
) -> UserResponse:
    removed = await service.remove(user_id)
    logger.info(f"removed user '{removed.user_id}' with email '{removed.email}'")
    return UserResponse.from_entity(removed, privileged_emails)
