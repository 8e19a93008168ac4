import os
from datetime import UTC, datetime, timedelta
from typing import Any, cast

from jose import jwt

from src.rules.models import DURATION_PATTERN

SECRET_KEY = os.environ.get("SIGNUP_SECRET_KEY", "dev-secret-unsafe")
ALGORITHM = "HS256"

_UNIT_SECONDS = {
    "s": 1,
    "m": 60,
    "h": 60 * 60,
    "d": 60 * 60 * 24,
    "w": 60 * 60 * 24 * 7,
}


def parse_duration(value: str) -> timedelta:
    """Parse an expiry string such as "7d" or "12h" into a timedelta."""
    match = DURATION_PATTERN.match(value)
    if not match:
        raise ValueError(f"Invalid duration: {value!r}")
    amount, unit = match.groups()
    return timedelta(seconds=int(amount) * _UNIT_SECONDS[unit])


def create_access_token(
    claims: dict[str, Any], lifetime: timedelta, now_utc: datetime | None = None
) -> str:
    """Sign ``claims`` with an ``exp`` of now + lifetime. ``now_utc`` pins the clock in tests."""
    issued_at = now_utc if now_utc is not None else datetime.now(UTC)
    encoded: str = jwt.encode(
        {**claims, "exp": issued_at + lifetime}, SECRET_KEY, algorithm=ALGORITHM
    )
    return encoded


def decode_access_token(token: str) -> dict[str, Any] | None:
    """Return the claims of a valid, unexpired token, else None."""
    try:
        return cast(dict[str, Any], jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM]))
    except jwt.JWTError:
        return None
