from datetime import datetime
from typing import Any

from argon2 import PasswordHasher

from src.api.auth_utils import create_access_token, parse_duration


class Argon2PasswordEncrypter:
    """Password encrypter backed by argon2-cffi."""

    def __init__(self) -> None:
        self.ph = PasswordHasher()

    def encrypt(self, password: str) -> str:
        return str(self.ph.hash(password))


class JWTTokenAdapter:
    """Token adapter that signs JWT access tokens."""

    def __init__(self, now_utc: datetime | None = None) -> None:
        # Fixed clock for deterministic tests; None means wall clock
        self._now_utc = now_utc

    def generate(self, user_id: Any, expire_date: str) -> str:
        return create_access_token(
            {"sub": str(user_id)},
            parse_duration(expire_date),
            now_utc=self._now_utc,
        )
