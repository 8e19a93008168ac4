"""
Signup component - User registration pipeline.

Validates submitted fields, checks email uniqueness, encrypts the password,
creates the account and issues an access token.
"""

from .component import (
    EMAIL_ALREADY_USED,
    EMAIL_INCORRECT_FORMAT,
    EmailExists,
    NewAccount,
    TokenGenerator,
    UserValidator,
)
from .controller import SignUpController, normalize_email
from .models import HttpResponse, NewAccountInput, ValidationResult
from .ports import (
    EmailExistsPort,
    EmailValidatorPort,
    NewAccountPort,
    PasswordEncrypterPort,
    TokenAdapterPort,
    TokenGeneratorPort,
    UserRepoPort,
    UserValidatorPort,
)

__all__ = [
    # Entry points
    "SignUpController",
    "UserValidator",
    "EmailExists",
    "NewAccount",
    "TokenGenerator",
    "normalize_email",
    # Messages
    "EMAIL_ALREADY_USED",
    "EMAIL_INCORRECT_FORMAT",
    # Models
    "HttpResponse",
    "NewAccountInput",
    "ValidationResult",
    # Ports
    "EmailExistsPort",
    "EmailValidatorPort",
    "NewAccountPort",
    "PasswordEncrypterPort",
    "TokenAdapterPort",
    "TokenGeneratorPort",
    "UserRepoPort",
    "UserValidatorPort",
]
