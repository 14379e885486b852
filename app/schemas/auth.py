"""Request/response schemas for auth endpoints."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

Role = Literal["user", "admin"]

NAME_MIN_LEN = 2
NAME_MAX_LEN = 255
EMAIL_MAX_LEN = 255
PASSWORD_MIN_LEN = 6
PASSWORD_MAX_LEN = 72
# bcrypt distinguishes passwords only up to 72 UTF-8 bytes
PASSWORD_MAX_BYTES = 72


def _normalize_email(v: object) -> object:
    if isinstance(v, str):
        return v.strip().lower()
    return v


class SignUpRequest(BaseModel):
    """Body for POST /auth/sign-up."""

    name: str = Field(..., min_length=NAME_MIN_LEN, max_length=NAME_MAX_LEN)
    email: EmailStr
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    role: Role = "user"

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v: object) -> object:
        return _normalize_email(v)

    @field_validator("email")
    @classmethod
    def limit_email_length(cls, v: str) -> str:
        if len(v) > EMAIL_MAX_LEN:
            raise ValueError(f"must be at most {EMAIL_MAX_LEN} characters")
        return v

    @field_validator("password")
    @classmethod
    def limit_password_bytes(cls, v: str) -> str:
        if len(v.encode("utf-8")) > PASSWORD_MAX_BYTES:
            raise ValueError(f"must be at most {PASSWORD_MAX_BYTES} bytes when UTF-8 encoded")
        return v


class SignInRequest(BaseModel):
    """Body for POST /auth/sign-in."""

    email: EmailStr
    password: str = Field(..., min_length=1)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v: object) -> object:
        return _normalize_email(v)


class PublicUser(BaseModel):
    """User fields safe to return to clients (no password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: str
    created_at: datetime | None = None


class AuthResponse(BaseModel):
    """Response for sign-up and sign-in."""

    message: str
    user: PublicUser


class MessageResponse(BaseModel):
    message: str


class TokenClaims(BaseModel):
    """Claims carried by the session token."""

    sub: str
    id: int
    email: str
    role: str
    iat: int
    exp: int
