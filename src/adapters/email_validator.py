import re
from typing import Any

# --- Email Validation Regex (RFC 5322 simplified) ---

EMAIL_REGEX = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@"
    r"[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)+$"
)

MAX_EMAIL_LENGTH = 254


class RegexEmailValidator:
    """Email format checker backed by EMAIL_REGEX."""

    def valid(self, email: Any) -> bool:
        if not isinstance(email, str):
            return False
        normalized = email.strip()
        if not normalized or len(normalized) > MAX_EMAIL_LENGTH:
            return False
        return EMAIL_REGEX.match(normalized) is not None
