import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from src.adapters.auth.crypto import Argon2PasswordEncrypter, JWTTokenAdapter
from src.adapters.clock import SystemClock
from src.adapters.email_validator import RegexEmailValidator
from src.adapters.sqlite.repos import SQLiteUserRepo
from src.components.signup import (
    EmailExists,
    NewAccount,
    SignUpController,
    TokenGenerator,
    UserValidator,
)
from src.rules.loader import load_rules
from src.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(os.environ.get("SIGNUP_DATA_DIR", "./data"))
        self.db_path = str(self.data_dir / "signup.db")
        self.migrations_dir = self.base_dir / "migrations"
        self.rules_path = Path(
            os.environ.get("SIGNUP_RULES_PATH", str(self.base_dir / "rules.yaml"))
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def load_rules_once(rules_path: Path) -> Rules:
    """Rules are read once per path; startup primes the cache."""
    return load_rules(rules_path)


def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return load_rules_once(settings.rules_path)


# --- Repos ---
def get_user_repo(settings: Settings = Depends(get_settings)) -> SQLiteUserRepo:
    return SQLiteUserRepo(settings.db_path)


# --- Adapters ---
def get_email_validator() -> RegexEmailValidator:
    return RegexEmailValidator()


def get_password_encrypter() -> Argon2PasswordEncrypter:
    return Argon2PasswordEncrypter()


def get_token_adapter() -> JWTTokenAdapter:
    return JWTTokenAdapter()


# Time adapter for deterministic time operations
_clock_instance: SystemClock | None = None


def get_clock() -> SystemClock:
    """Get clock singleton."""
    global _clock_instance
    if _clock_instance is None:
        _clock_instance = SystemClock()
    return _clock_instance


# --- Controller ---
def get_signup_controller(
    rules: Rules = Depends(get_rules),
    user_repo: SQLiteUserRepo = Depends(get_user_repo),
    email_validator: RegexEmailValidator = Depends(get_email_validator),
    password_encrypter: Argon2PasswordEncrypter = Depends(get_password_encrypter),
    token_adapter: JWTTokenAdapter = Depends(get_token_adapter),
    clock: SystemClock = Depends(get_clock),
) -> SignUpController:
    """Wire the signup pipeline for one request."""
    return SignUpController(
        user_validator=UserValidator(email_validator, rules.signup),
        email_exists=EmailExists(user_repo),
        new_account=NewAccount(user_repo, clock),
        password_encrypter=password_encrypter,
        token_generator=TokenGenerator(token_adapter, rules.signup.token_expiry),
    )
