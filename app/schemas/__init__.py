"""Pydantic request/response schemas."""

from app.schemas.auth import (
    AuthResponse,
    MessageResponse,
    PublicUser,
    SignInRequest,
    SignUpRequest,
    TokenClaims,
)
from app.schemas.health import HealthResponse

__all__ = [
    "AuthResponse",
    "HealthResponse",
    "MessageResponse",
    "PublicUser",
    "SignInRequest",
    "SignUpRequest",
    "TokenClaims",
]
