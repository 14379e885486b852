"""Password hashing and JWT creation/verification for authentication."""

import logging
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import bcrypt
import jwt
from pydantic import ValidationError

from app.schemas.auth import TokenClaims

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)

# Bcrypt cost (rounds).
BCRYPT_ROUNDS = 10

# bcrypt only looks at the first 72 bytes of a password; longer ones are rejected.
BCRYPT_MAX_BYTES = 72


class HashingError(Exception):
    """Raised when the password hashing primitive fails. Message is safe to log, not to return."""

    def __init__(self, message: str = "Error hashing password") -> None:
        self.message = message
        super().__init__(message)


class TokenSigningError(Exception):
    """Raised when a JWT cannot be signed (e.g. misconfigured secret or algorithm)."""

    def __init__(self, message: str = "Failed to sign token") -> None:
        self.message = message
        super().__init__(message)


class TokenInvalidError(Exception):
    """Raised when a JWT has a bad signature, is expired, or carries malformed claims."""

    def __init__(self, message: str = "Invalid or expired token") -> None:
        self.message = message
        super().__init__(message)


def password_too_long(plain_password: str) -> bool:
    """True when the password exceeds what bcrypt can tell apart (72 UTF-8 bytes)."""
    return len(plain_password.encode("utf-8")) > BCRYPT_MAX_BYTES


def hash_password(plain_password: str) -> str:
    """
    Hash a plain-text password for storage. Do not store plain passwords.
    Passwords over 72 UTF-8 bytes are refused rather than truncated.
    """
    try:
        if password_too_long(plain_password):
            raise ValueError(f"password exceeds {BCRYPT_MAX_BYTES} bytes")
        hashed = bcrypt.hashpw(
            plain_password.encode("utf-8"), bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
        )
    except Exception as e:
        logger.error("Error hashing the password: %s", e)
        raise HashingError() from e
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash. Over-long passwords never match."""
    try:
        if password_too_long(plain_password):
            return False
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed.encode("utf-8"))
    except (ValueError, TypeError, AttributeError):
        return False


def create_access_token(
    user_id: int, email: str, role: str, settings: "Settings"
) -> str:
    """Create a JWT carrying sub/id, email, role, iat and exp (JWT_EXPIRE_MINUTES from now)."""
    now = datetime.now(UTC)
    expire = now + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "id": user_id,
        "email": email,
        "role": role,
        "iat": now,
        "exp": expire,
    }
    try:
        return jwt.encode(
            payload,
            settings.JWT_SECRET.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
        )
    except Exception as e:
        logger.error("Failed to sign token for user_id=%s: %s", user_id, e)
        raise TokenSigningError() from e


def decode_access_token(token: str, settings: "Settings") -> TokenClaims:
    """
    Decode and validate a JWT; return its claims.
    Raises TokenInvalidError on bad signature, expiry, or malformed payload.
    """
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET.get_secret_value(),
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["exp", "iat", "sub"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise TokenInvalidError("Token expired") from e
    except jwt.PyJWTError as e:
        logger.debug("Rejected token: %s", e)
        raise TokenInvalidError() from e
    try:
        return TokenClaims.model_validate(payload)
    except ValidationError as e:
        raise TokenInvalidError("Invalid token payload") from e
