from pydantic import BaseModel, Field


# --- Signup ---
class SignupRequest(BaseModel):
    """Documented shape of the signup body. Validation happens in the component."""

    firstName: str = Field(..., description="More than 3 characters")
    lastName: str = Field(..., description="More than 3 characters")
    email: str
    password: str = Field(..., description="More than 6 characters")


class TokenResponse(BaseModel):
    token: str


class ErrorResponse(BaseModel):
    error: str
