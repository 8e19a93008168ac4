from datetime import UTC, datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

# --- User & Auth ---


class User(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    first_name: str
    last_name: str
    email: str
    password: str  # Stored (encrypted) form, never the plaintext
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class Token(BaseModel):
    token: str
