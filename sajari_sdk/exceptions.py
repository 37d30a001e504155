"""SDK exception hierarchy.

All custom exceptions inherit from SajariError.
Each exception has an error code for structured error handling.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error handling."""

    # General errors (1xxx)
    INTERNAL_ERROR = "SDK-1000"
    CONFIGURATION_ERROR = "SDK-1001"
    VALIDATION_ERROR = "SDK-1002"

    # Local marshaling errors (2xxx)
    INVALID_OPERATOR = "SDK-2000"
    INVALID_ENUM = "SDK-2001"
    INVALID_VALUE = "SDK-2002"
    EMPTY_KEY = "SDK-2003"
    BATCH_LENGTH_MISMATCH = "SDK-2004"
    INVALID_RESPONSE = "SDK-2005"

    # Remote per-item errors (3xxx)
    RECORD_NOT_FOUND = "SDK-3000"
    REMOTE_STATUS = "SDK-3001"
    MULTIPLE_ERRORS = "SDK-3002"


class StatusCode(int, Enum):
    """RPC status codes reported per item by the service."""

    OK = 0
    CANCELLED = 1
    UNKNOWN = 2
    INVALID_ARGUMENT = 3
    DEADLINE_EXCEEDED = 4
    NOT_FOUND = 5
    ALREADY_EXISTS = 6
    PERMISSION_DENIED = 7
    RESOURCE_EXHAUSTED = 8
    FAILED_PRECONDITION = 9
    ABORTED = 10
    OUT_OF_RANGE = 11
    UNIMPLEMENTED = 12
    INTERNAL = 13
    UNAVAILABLE = 14
    DATA_LOSS = 15
    UNAUTHENTICATED = 16


class SajariError(Exception):
    """Base exception for all SDK errors.

    Attributes:
        message: Human-readable error message.
        code: Structured error code.
        details: Additional error context.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary."""
        return {
            "error": {
                "code": self.code.value,
                "message": self.message,
                "details": self.details,
            }
        }


class ConfigurationError(SajariError):
    """Configuration or environment error."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR, details)


class ValidationError(SajariError):
    """Local validation error, raised before any call is made."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class RecordNotFoundError(SajariError):
    """A requested record does not exist."""

    def __init__(
        self,
        message: str = "sajari: no such record",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.RECORD_NOT_FOUND, details)


class RemoteStatusError(SajariError):
    """A non-OK status reported by the service for a single item.

    Attributes:
        status: RPC status code reported by the service.
    """

    def __init__(
        self,
        status: StatusCode | int,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        try:
            self.status: StatusCode | int = StatusCode(status)
        except ValueError:
            self.status = status
        name = self.status.name if isinstance(self.status, StatusCode) else str(status)
        super().__init__(
            f"rpc error: code = {name} desc = {message}",
            ErrorCode.REMOTE_STATUS,
            details,
        )


class MultiError(SajariError):
    """Errors from a batch call, addressable by input position.

    Attributes:
        errors: One entry per input item, None where the item succeeded.
    """

    def __init__(self, errors: list[Exception | None]) -> None:
        self.errors = list(errors)
        super().__init__(
            self._summary(),
            ErrorCode.MULTIPLE_ERRORS,
            {"failed": [i for i, e in enumerate(self.errors) if e is not None]},
        )

    def _summary(self) -> str:
        failed = [e for e in self.errors if e is not None]
        if not failed:
            return "(0 errors)"
        first = str(failed[0])
        if len(failed) == 1:
            return first
        if len(failed) == 2:
            return f"{first} (and 1 other error)"
        return f"{first} (and {len(failed) - 1} other errors)"

    def __len__(self) -> int:
        return len(self.errors)

    def __getitem__(self, index: int) -> Exception | None:
        return self.errors[index]
