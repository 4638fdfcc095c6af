"""Mesh domain exceptions."""

from domain.shared.errors import InternalError, NotFoundError, ServiceError


class MeshNotFoundError(NotFoundError):
    """Mesh was not found in the store."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"mesh with id {identifier} does not exist")


class MeshValidationError(ServiceError):
    """Mesh creation input is invalid."""

    status_code = 400
    is_public = True
    kind = "bad_request"


class MeshCreationError(InternalError):
    """Mesh could not be persisted."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unable to create mesh '{name}'")
