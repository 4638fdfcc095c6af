"""Service error taxonomy.

Every failure that leaves the domain/application core is one of these kinds.
The HTTP layer maps them to responses without inspecting store- or
provider-specific exception types.

Kinds:
- NotFound (404, public): lookup by id finds nothing
- Conflict (409, public): uniqueness constraint violated
- Unauthorized (401, public): identity verification failed
- Internal (500, private): any other persistence or unknown failure
"""

from typing import Optional

INTERNAL_ERROR_MESSAGE = "Internal server error"


class ServiceError(Exception):
    """Base class for classified service errors.

    Attributes:
        message: Human-readable message (may contain private details)
        status_code: HTTP status affinity
        is_public: Whether ``message`` may be returned verbatim to callers
        kind: Short machine-readable error kind
    """

    status_code: int = 500
    is_public: bool = False
    kind: str = "internal"

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)

    @property
    def public_message(self) -> str:
        """Message safe to return to the caller."""
        if self.is_public:
            return self.message
        return INTERNAL_ERROR_MESSAGE

    def to_dict(self) -> dict:
        """Serialize to the public error payload."""
        return {"error": self.kind, "message": self.public_message}


class NotFoundError(ServiceError):
    """Requested resource does not exist."""

    status_code = 404
    is_public = True
    kind = "not_found"


class ConflictError(ServiceError):
    """A uniqueness constraint was violated."""

    status_code = 409
    is_public = True
    kind = "conflict"


class UnauthorizedError(ServiceError):
    """Caller identity could not be verified."""

    status_code = 401
    is_public = True
    kind = "unauthorized"


class InternalError(ServiceError):
    """Unclassified failure. The message is never shown to callers."""

    status_code = 500
    is_public = False
    kind = "internal"
