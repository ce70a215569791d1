"""Domain errors for hotel eligibility and catalog reads.

The set is closed: ``Unauthorized``, ``NotFound`` and ``InvalidData`` are the
only outcomes the services raise. The HTTP layer maps them to status codes.
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    UNAUTHORIZED = "UNAUTHORIZED"
    NOT_FOUND = "NOT_FOUND"
    INVALID_DATA = "INVALID_DATA"


class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class Unauthorized(DomainError):
    """No verified session, or the user has no enrollment."""

    code = ErrorCode.UNAUTHORIZED

    def __init__(self, message: str = "You must sign in to continue") -> None:
        super().__init__(message)


class NotFound(DomainError):
    """No eligible ticket, or the requested hotel does not exist."""

    code = ErrorCode.NOT_FOUND

    def __init__(self, message: str = "No result for this search!") -> None:
        super().__init__(message)


class InvalidData(DomainError):
    """The request is well-formed but the user's state does not allow it.

    Carries the list of human-readable reasons.
    """

    code = ErrorCode.INVALID_DATA

    def __init__(self, details: list[str]) -> None:
        super().__init__("Invalid data")
        self.details = list(details)

    def __str__(self) -> str:
        return f"{self.code.value}: {', '.join(self.details)}"

