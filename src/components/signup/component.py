"""
Signup component - Functional core of user registration.

Each capability is a small class with a single entry point; collaborators
are injected through the constructor as ports.

Key behaviors:
- Field validation is sequential, first failure wins
- Duplicate emails raise a client SignupError
- Accounts are created from the encrypted password only
- Tokens are issued with the configured expiry
"""

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID, uuid4

from src.domain.entities import Token, User
from src.domain.errors import EMAIL_ALREADY_USED, bad_request
from src.rules.models import SignupRules

from .models import NewAccountInput, ValidationResult
from .ports import EmailValidatorPort, TimePort, TokenAdapterPort, UserRepoPort

logger = logging.getLogger(__name__)

EMAIL_INCORRECT_FORMAT = '"email" has a incorrect format'


def _must_be_string(field_name: str) -> str:
    return f'"{field_name}" must be a string'


def _too_short(field_name: str, min_length: int) -> str:
    return f'"{field_name}" need to have more than {min_length} length'


class UserValidator:
    """Checks the submitted signup fields in a fixed order."""

    def __init__(
        self, email_validator: EmailValidatorPort, rules: SignupRules | None = None
    ) -> None:
        self.email_validator = email_validator
        self.rules = rules or SignupRules()

    def _check_text(self, data: dict[str, Any], field_name: str, min_length: int) -> str | None:
        value = data.get(field_name)
        if not isinstance(value, str):
            return _must_be_string(field_name)
        if len(value) <= min_length:
            return _too_short(field_name, min_length)
        return None

    def create(self, data: dict[str, Any]) -> ValidationResult:
        checks = (
            ("firstName", self.rules.first_name_min_length),
            ("lastName", self.rules.last_name_min_length),
            ("password", self.rules.password_min_length),
        )
        for field_name, min_length in checks:
            error = self._check_text(data, field_name, min_length)
            if error:
                return ValidationResult(error=error)

        if not self.email_validator.valid(data.get("email")):
            return ValidationResult(error=EMAIL_INCORRECT_FORMAT)

        return ValidationResult(error=None)


class EmailExists:
    """Uniqueness check against the user repository."""

    def __init__(self, user_repo: UserRepoPort) -> None:
        self.user_repo = user_repo

    def valid(self, email: str) -> None:
        if self.user_repo.get_by_email(email) is not None:
            raise bad_request(EMAIL_ALREADY_USED)


class NewAccount:
    def __init__(self, user_repo: UserRepoPort, time: TimePort) -> None:
        self.user_repo = user_repo
        self.time = time

    def create(self, payload: NewAccountInput) -> User:
        user = User(
            id=uuid4(),
            first_name=payload.first_name,
            last_name=payload.last_name,
            email=payload.email,
            password=payload.password,
            created_at=self.time.now_utc(),
        )
        saved = self.user_repo.save(user)
        logger.info("Account %s created", saved.id)
        return saved


class TokenGenerator:
    """Issues an access token through the token adapter."""

    def __init__(self, token_adapter: TokenAdapterPort, expire_date: str = "7d") -> None:
        self.token_adapter = token_adapter
        self.expire_date = expire_date

    def create(self, user_id: UUID) -> Token:
        return Token(token=self.token_adapter.generate(user_id, self.expire_date))
