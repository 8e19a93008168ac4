"""
Signup error type.

A single tagged exception is used for every failure the signup pipeline
classifies. Callers branch on ``kind`` rather than on subclasses:

- ``client``: caller-correctable problem (validation, duplicate email).
  Carries the status and the user-facing message.
- ``internal``: anything else. Mapped to a generic 500 so internals
  never reach the response body.
"""

from __future__ import annotations

from typing import Literal

ErrorKind = Literal["client", "internal"]

INTERNAL_SERVER_ERROR = "internal server error"
EMAIL_ALREADY_USED = '"email" already used'


class SignupError(Exception):
    """Error carrying a kind tag, an HTTP-like status and a message."""

    def __init__(self, message: str, *, kind: ErrorKind = "client", status: int = 400) -> None:
        self.message = message
        self.kind: ErrorKind = kind
        self.status = status
        super().__init__(message)

    @property
    def is_client_error(self) -> bool:
        return self.kind == "client"


def bad_request(message: str) -> SignupError:
    return SignupError(message, kind="client", status=400)


def internal_error(message: str = INTERNAL_SERVER_ERROR) -> SignupError:
    return SignupError(message, kind="internal", status=500)
