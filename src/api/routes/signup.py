"""
Signup endpoint.

Endpoints:
- POST /api/signup - Register a new account and return an access token
"""

from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from src.api.deps import get_signup_controller
from src.api.schemas import ErrorResponse, SignupRequest, TokenResponse
from src.components.signup import SignUpController

router = APIRouter()


@router.post(
    "",
    status_code=201,
    response_model=TokenResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid field or email already used"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": SignupRequest.model_json_schema()}}
        }
    },
    summary="Register a new account",
)
def signup(
    body: dict[str, Any] = Body(...),
    controller: SignUpController = Depends(get_signup_controller),
) -> JSONResponse:
    """
    Create an account and issue an access token.

    The raw body goes to the controller so non-string fields are reported
    with the component's own messages instead of a 422.
    """
    result = controller.handle(body)
    return JSONResponse(status_code=result.status_code, content=result.body)
