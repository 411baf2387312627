"""
Auth endpoints (mock)
=====================

POST /api/login  -- accept any email / password pair
POST /api/signup -- accept any complete sign-up form

No credentials are checked; the only failure is a missing field.
"""

from typing import Optional

from fastapi import APIRouter

from ridemock.api.errors import MissingFieldsError
from ridemock.api.schemas import (
    AuthResponse,
    ErrorResponse,
    LoginRequest,
    SignupRequest,
    UserResponse,
)

router = APIRouter(tags=["auth"])

LOGIN_TOKEN = "mock_token_12345"
SIGNUP_TOKEN = "mock_token_67890"


def _require(body, fields: list[str], message: str) -> None:
    missing = [f for f in fields if not getattr(body, f, None)]
    if missing:
        raise MissingFieldsError(message, missing)


@router.post(
    "/login",
    response_model=AuthResponse,
    summary="Log in (any credentials accepted)",
    responses={400: {"model": ErrorResponse}},
)
async def login(body: Optional[LoginRequest] = None):
    body = body or LoginRequest()
    _require(body, ["email", "password"], "Invalid credentials")
    return AuthResponse(
        token=LOGIN_TOKEN,
        user=UserResponse(id=1, first_name="Demo", last_name="User", email=body.email),
    )


@router.post(
    "/signup",
    response_model=AuthResponse,
    summary="Sign up (any complete form accepted)",
    responses={400: {"model": ErrorResponse}},
)
async def signup(body: Optional[SignupRequest] = None):
    body = body or SignupRequest()
    _require(
        body, ["email", "password", "first_name", "last_name"], "Missing fields"
    )
    return AuthResponse(
        token=SIGNUP_TOKEN,
        user=UserResponse(
            id=2,
            first_name=body.first_name,
            last_name=body.last_name,
            email=body.email,
        ),
    )
