"""
Signup controller - orchestrates the signup pipeline for one request.

Steps run in strict sequence:
1. Field validation (400 on error)
2. Email uniqueness on the normalized (stripped, lowercased) email (400 on duplicate)
3. Password encryption
4. Account creation with the encrypted password
5. Token issuance (201 with the token)

Client SignupErrors raised by any step become 400 with their message.
Every other exception becomes a generic 500.
"""

from __future__ import annotations

import logging
from typing import Any

from src.domain.errors import INTERNAL_SERVER_ERROR, SignupError

from .models import HttpResponse, NewAccountInput
from .ports import (
    EmailExistsPort,
    NewAccountPort,
    PasswordEncrypterPort,
    TokenGeneratorPort,
    UserValidatorPort,
)

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def bad_request_response(message: str) -> HttpResponse:
    return HttpResponse(status_code=400, body={"error": message})


def server_error_response() -> HttpResponse:
    return HttpResponse(status_code=500, body={"error": INTERNAL_SERVER_ERROR})


def created_response(body: dict[str, Any]) -> HttpResponse:
    return HttpResponse(status_code=201, body=body)


class SignUpController:
    def __init__(
        self,
        user_validator: UserValidatorPort,
        email_exists: EmailExistsPort,
        new_account: NewAccountPort,
        password_encrypter: PasswordEncrypterPort,
        token_generator: TokenGeneratorPort,
    ) -> None:
        self.user_validator = user_validator
        self.email_exists = email_exists
        self.new_account = new_account
        self.password_encrypter = password_encrypter
        self.token_generator = token_generator

    def handle(self, body: dict[str, Any]) -> HttpResponse:
        try:
            validation = self.user_validator.create(body)
            if validation.error is not None:
                return bad_request_response(validation.error)

            email = normalize_email(body["email"])
            self.email_exists.valid(email)

            encrypted = self.password_encrypter.encrypt(body["password"])
            user = self.new_account.create(
                NewAccountInput(
                    first_name=body["firstName"],
                    last_name=body["lastName"],
                    email=email,
                    password=encrypted,
                )
            )

            token = self.token_generator.create(user.id)
            return created_response({"token": token.token})

        except SignupError as e:
            if e.is_client_error:
                return HttpResponse(status_code=e.status, body={"error": e.message})
            logger.error("Signup failed: %s", e.message)
            return server_error_response()
        except Exception:
            logger.exception("Unexpected error during signup")
            return server_error_response()
