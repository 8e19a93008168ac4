from dataclasses import dataclass, field
from typing import Any


@dataclass
class ValidationResult:
    error: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.error is None


@dataclass
class NewAccountInput:
    """Creation payload. ``password`` is always the encrypted value."""

    first_name: str
    last_name: str
    email: str
    password: str


@dataclass
class HttpResponse:
    status_code: int
    body: dict[str, Any] = field(default_factory=dict)
