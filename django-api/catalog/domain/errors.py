"""Domain error codes for the catalog module."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    EDITION_NOT_FOUND = "EDITION_NOT_FOUND"
    PAPER_NOT_FOUND = "PAPER_NOT_FOUND"
    INVALID_ID = "INVALID_ID"
    INVALID_PATCH = "INVALID_PATCH"
    ACCESS_DENIED = "ACCESS_DENIED"
    CORRUPT_COLLECTION = "CORRUPT_COLLECTION"
    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str
    entity_id: str | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class NotFoundError(DomainError):
    """Raised when an operation references an id absent from the collection."""

    entity = "Entity"
    error_code = ErrorCode.EVENT_NOT_FOUND

    def __init__(self, entity_id: str) -> None:
        super().__init__(
            code=self.error_code,
            message=f"{self.entity} not found",
            entity_id=entity_id,
        )


class EventNotFoundError(NotFoundError):
    """Raised when an event is not found."""

    entity = "Event"
    error_code = ErrorCode.EVENT_NOT_FOUND


class EditionNotFoundError(NotFoundError):
    """Raised when an edition is not found on its event."""

    entity = "Edition"
    error_code = ErrorCode.EDITION_NOT_FOUND


class PaperNotFoundError(NotFoundError):
    """Raised when a paper is not found."""

    entity = "Paper"
    error_code = ErrorCode.PAPER_NOT_FOUND


class InvalidIdError(DomainError):
    """Raised when an entity ID is blank or malformed."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ID,
            message="Invalid ID format",
        )


@dataclass(frozen=True)
class InvalidPatchError(DomainError):
    """Raised when create/update fields are unknown or fail validation."""

    fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def for_entity(cls, entity: str, errors: dict[str, Any]) -> "InvalidPatchError":
        return cls(
            code=ErrorCode.INVALID_PATCH,
            message=f"Invalid {entity.lower()} fields",
            fields=errors,
        )


class AccessDeniedError(DomainError):
    """Raised when an unauthorized session reaches the admin surface."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ACCESS_DENIED,
            message="Admin privileges required",
        )


@dataclass(frozen=True)
class DeserializationError(DomainError):
    """Raised when a stored collection does not match its schema."""

    collection: str = ""
    detail: str = ""

    @classmethod
    def for_collection(cls, collection: str, detail: str) -> "DeserializationError":
        return cls(
            code=ErrorCode.CORRUPT_COLLECTION,
            message=f"Stored {collection} could not be read",
            collection=collection,
            detail=detail,
        )


@dataclass(frozen=True)
class PersistenceError(DomainError):
    """Raised when a collection cannot be written to the store."""

    collection: str = ""

    @classmethod
    def for_collection(cls, collection: str) -> "PersistenceError":
        return cls(
            code=ErrorCode.STORAGE_UNAVAILABLE,
            message=f"Could not save {collection}",
            collection=collection,
        )
