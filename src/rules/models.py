import re

from pydantic import BaseModel, Field, field_validator

DURATION_PATTERN = re.compile(r"^(\d+)([smhdw])$")


class ProjectRules(BaseModel):
    slug: str
    rules_version: str


class SignupRules(BaseModel):
    first_name_min_length: int = Field(default=3, ge=0)
    last_name_min_length: int = Field(default=3, ge=0)
    password_min_length: int = Field(default=6, ge=0)
    token_expiry: str = "7d"

    @field_validator("token_expiry")
    @classmethod
    def validate_token_expiry(cls, v: str) -> str:
        if not DURATION_PATTERN.match(v):
            raise ValueError(f"token_expiry must look like '7d' or '12h', got {v!r}")
        return v


class Rules(BaseModel):
    project: ProjectRules
    signup: SignupRules = Field(default_factory=SignupRules)
