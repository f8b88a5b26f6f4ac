"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    AUTHENTICATION_REQUIRED = "AUTHENTICATION_REQUIRED"
    AUTHORIZATION_DENIED = "AUTHORIZATION_DENIED"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    REGISTRATION_NOT_FOUND = "REGISTRATION_NOT_FOUND"
    DUPLICATE_REGISTRATION = "DUPLICATE_REGISTRATION"
    STORE_FAILURE = "STORE_FAILURE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventValidationError(DomainError):
    """Raised with every field message collected from a rejected input."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION_FAILED,
            message="Invalid event input",
        )
        self.errors = tuple(errors)


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class AuthenticationRequiredError(DomainError):
    """Raised when a mutation arrives without a valid identity."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.AUTHENTICATION_REQUIRED,
            message="Valid authorization token required",
        )


class AuthorizationDeniedError(DomainError):
    """Raised when the caller does not own the event."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.AUTHORIZATION_DENIED,
            message="You are not allowed to modify this event",
        )
        self.event_id = event_id


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class RegistrationNotFoundError(DomainError):
    """Raised when unregistering a user who holds no registration."""

    def __init__(self, event_id: str, user_id: str) -> None:
        super().__init__(
            code=ErrorCode.REGISTRATION_NOT_FOUND,
            message="Registration not found",
        )
        self.event_id = event_id
        self.user_id = user_id


class DuplicateRegistrationError(DomainError):
    """Raised when the (event, user) uniqueness constraint rejects an insert."""

    def __init__(self, event_id: str, user_id: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_REGISTRATION,
            message="Already registered for this event",
        )
        self.event_id = event_id
        self.user_id = user_id


class StoreFailureError(DomainError):
    """Raised for unexpected persistence errors.

    ``message`` stays generic; ``detail`` is for operators and logs only.
    """

    def __init__(self, detail: str) -> None:
        super().__init__(
            code=ErrorCode.STORE_FAILURE,
            message="Storage operation failed",
        )
        self.detail = detail
