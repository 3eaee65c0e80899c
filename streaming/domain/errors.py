"""Domain error codes for the streaming module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    CONTENT_NOT_REGISTERED = "CONTENT_NOT_REGISTERED"
    CONTENT_NOT_FOUND = "CONTENT_NOT_FOUND"
    INVALID_CONTENT_KIND = "INVALID_CONTENT_KIND"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ContentNotRegisteredError(DomainError):
    """Raised when watch counts are touched for content never added to the catalog."""

    def __init__(self, title: str) -> None:
        super().__init__(
            code=ErrorCode.CONTENT_NOT_REGISTERED,
            message=f"Content '{title}' is not registered in the catalog",
        )
        self.title = title


class ContentNotFoundError(DomainError):
    """Raised when a content id does not match any catalog entry."""

    def __init__(self, content_id: int) -> None:
        super().__init__(
            code=ErrorCode.CONTENT_NOT_FOUND,
            message="Content not found",
        )
        self.content_id = content_id


class InvalidContentKindError(DomainError):
    """Raised when a content kind name is not recognised."""

    def __init__(self, value: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CONTENT_KIND,
            message=f"Unknown content kind '{value}'",
        )
        self.value = value
