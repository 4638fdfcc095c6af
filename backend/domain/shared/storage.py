"""Storage error classification shared by store adapters.

Store adapters translate their driver-specific failures into a
:class:`StorageError` carrying a :class:`StorageErrorKind`, so repositories
never look at driver error codes.
"""

from enum import Enum
from typing import Optional


class StorageErrorKind(str, Enum):
    """Classified storage failure."""

    DUPLICATE_KEY = "duplicate_key"
    NOT_FOUND = "not_found"
    OTHER = "other"


class StorageError(Exception):
    """Storage operation failed.

    Attributes:
        kind: Classified failure kind
        operation: Store operation that failed (e.g. "insert_one")
    """

    def __init__(
        self,
        kind: StorageErrorKind,
        operation: str,
        detail: Optional[str] = None,
    ) -> None:
        self.kind = kind
        self.operation = operation
        self.detail = detail
        message = f"Storage error during {operation}: {kind.value}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)

    @property
    def is_duplicate_key(self) -> bool:
        return self.kind is StorageErrorKind.DUPLICATE_KEY

    @property
    def is_not_found(self) -> bool:
        return self.kind is StorageErrorKind.NOT_FOUND
