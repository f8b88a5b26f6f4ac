"""Account signup and login against Django's auth user table."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.core.validators import validate_email
from django.db import IntegrityError, transaction

from accounts.errors import AccountValidationError, EmailTakenError, InvalidCredentialsError
from accounts.tokens import issue_token

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


@dataclass(frozen=True)
class Account:
    """Public view of a user; never carries the password hash."""

    id: int
    email: str
    name: str | None
    created_at: datetime


def _to_account(user) -> Account:
    return Account(
        id=user.pk,
        email=user.email,
        name=user.first_name or None,
        created_at=user.date_joined,
    )


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


class AccountService:
    """Creates accounts and exchanges credentials for tokens."""

    def __init__(self) -> None:
        self._users = get_user_model()

    def signup(self, email: Any, password: Any, name: Any = None) -> tuple[Account, str]:
        """Create an account and return it with a fresh token.

        Raises:
            AccountValidationError: With every problem found in the input.
            EmailTakenError: If the email is already registered.
        """
        email = _text(email).lower()
        password = _text(password)
        errors: list[str] = []

        if not email:
            errors.append("Email is required")
        else:
            try:
                validate_email(email)
            except ValidationError:
                errors.append("A valid email address is required")

        if not password:
            errors.append("Password is required")
        elif len(password) < MIN_PASSWORD_LENGTH:
            errors.append(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")

        if errors:
            raise AccountValidationError(errors)

        if self._users.objects.filter(username=email).exists():
            raise EmailTakenError()
        try:
            with transaction.atomic():
                user = self._users.objects.create_user(
                    username=email, email=email, password=password, first_name=_text(name)
                )
        except IntegrityError as exc:
            raise EmailTakenError() from exc

        account = _to_account(user)
        logger.info("account created id=%s", account.id)
        return account, issue_token({"id": account.id, "email": account.email})

    def login(self, email: Any, password: Any) -> tuple[Account, str]:
        """Return the account and a token for valid credentials.

        Raises:
            AccountValidationError: If email or password is missing.
            InvalidCredentialsError: If they do not match an account.
        """
        email = _text(email).lower()
        password = _text(password)
        if not email or not password:
            raise AccountValidationError(["Email and password are required"])

        user = self._users.objects.filter(username=email).first()
        if user is None or not user.is_active or not user.check_password(password):
            logger.info("failed login attempt")
            raise InvalidCredentialsError()

        account = _to_account(user)
        return account, issue_token({"id": account.id, "email": account.email})
