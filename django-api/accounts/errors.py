"""Domain error codes for the accounts module."""

from dataclasses import dataclass
from enum import Enum


class AccountErrorCode(Enum):
    """Account error codes."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    EMAIL_TAKEN = "EMAIL_TAKEN"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    INVALID_TOKEN = "INVALID_TOKEN"


@dataclass(frozen=True)
class AccountError(Exception):
    """Base account error with code and user-safe message."""

    code: AccountErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class AccountValidationError(AccountError):
    def __init__(self, errors: list[str]) -> None:
        super().__init__(
            code=AccountErrorCode.VALIDATION_FAILED,
            message="Invalid account input",
        )
        self.errors = tuple(errors)


class EmailTakenError(AccountError):
    def __init__(self) -> None:
        super().__init__(
            code=AccountErrorCode.EMAIL_TAKEN,
            message="User with this email already exists",
        )


class InvalidCredentialsError(AccountError):
    def __init__(self) -> None:
        super().__init__(
            code=AccountErrorCode.INVALID_CREDENTIALS,
            message="Invalid email or password",
        )


class InvalidTokenError(AccountError):
    """Raised when a bearer token is malformed, forged or expired."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            code=AccountErrorCode.INVALID_TOKEN,
            message="Invalid or expired token",
        )
        self.reason = reason
