from datetime import datetime
from typing import Any, Protocol
from uuid import UUID

from src.domain.entities import Token, User

from .models import NewAccountInput, ValidationResult


class EmailValidatorPort(Protocol):
    def valid(self, email: Any) -> bool: ...


class UserValidatorPort(Protocol):
    def create(self, data: dict[str, Any]) -> ValidationResult: ...


class EmailExistsPort(Protocol):
    def valid(self, email: str) -> None:
        """Raise a client SignupError if the email is already registered."""
        ...


class PasswordEncrypterPort(Protocol):
    def encrypt(self, password: str) -> str: ...


class NewAccountPort(Protocol):
    def create(self, payload: NewAccountInput) -> User: ...


class TokenAdapterPort(Protocol):
    def generate(self, user_id: UUID, expire_date: str) -> str: ...


class TokenGeneratorPort(Protocol):
    def create(self, user_id: UUID) -> Token: ...


class UserRepoPort(Protocol):
    def get_by_email(self, email: str) -> User | None: ...
    def save(self, user: User) -> User: ...


class TimePort(Protocol):
    """Port for time operations - enables deterministic testing."""

    def now_utc(self) -> datetime:
        """Get current UTC time."""
        ...
