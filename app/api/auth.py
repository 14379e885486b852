"""Sign-up, sign-in and sign-out endpoints, plus the cookie-token dependency (get_token_claims)."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.cookies import clear_cookie, read_cookie, set_cookie
from app.core.database import get_db
from app.core.security import TokenInvalidError, create_access_token, decode_access_token
from app.schemas.auth import (
    AuthResponse,
    MessageResponse,
    PublicUser,
    SignInRequest,
    SignUpRequest,
    TokenClaims,
)
from app.services.auth import (
    DuplicateEmailError,
    InvalidPasswordError,
    UserNotFoundError,
    sign_in,
    sign_up,
)
from app.services.validation import validate

logger = logging.getLogger(__name__)
router = APIRouter()

INVALID_CREDENTIALS = "Invalid credentials"


async def read_raw_body(request: Request) -> bytes:
    """Dependency: the undecoded request body, so JSON errors reach the validator as 400s."""
    return await request.body()


def _json_body(schema: type[BaseModel]) -> dict:
    """OpenAPI requestBody for routes that read the raw body."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": schema.model_json_schema()}},
        }
    }


def _validation_failed(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={"error": "Validation failed", "details": message},
    )


def _issue_session(response: Response, user: PublicUser, settings: Settings) -> None:
    token = create_access_token(
        user_id=user.id, email=user.email, role=user.role, settings=settings
    )
    set_cookie(response, settings.AUTH_COOKIE_NAME, token, settings)


@router.post(
    "/sign-up",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    openapi_extra=_json_body(SignUpRequest),
)
def post_sign_up(
    response: Response,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
    payload: Annotated[bytes, Depends(read_raw_body)],
) -> AuthResponse:
    """Register with name, email, password and optional role; sets the auth cookie."""
    result = validate(SignUpRequest, payload)
    if not result.ok:
        raise _validation_failed(result.message)
    body = result.data

    try:
        user = sign_up(
            db,
            name=body.name,
            email=body.email,
            password=body.password,
            role=body.role,
        )
    except DuplicateEmailError as e:
        logger.warning("Sign-up rejected, email already registered: %s", e.email)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email already exists",
        ) from e

    _issue_session(response, user, settings)
    logger.info("User registered successfully: %s", user.email)
    return AuthResponse(message="User registered", user=user)


@router.post(
    "/sign-in",
    response_model=AuthResponse,
    openapi_extra=_json_body(SignInRequest),
)
def post_sign_in(
    response: Response,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
    payload: Annotated[bytes, Depends(read_raw_body)],
) -> AuthResponse:
    """Authenticate with email and password; sets the auth cookie."""
    result = validate(SignInRequest, payload)
    if not result.ok:
        raise _validation_failed(result.message)
    body = result.data

    try:
        user = sign_in(db, email=body.email, password=body.password)
    except (UserNotFoundError, InvalidPasswordError) as e:
        logger.warning("Sign-in failed for %s: %s", e.email, e.message)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_CREDENTIALS,
        ) from e

    _issue_session(response, user, settings)
    logger.info("User signed in successfully: %s", user.email)
    return AuthResponse(message="User signed in successfully", user=user)


@router.post("/sign-out", response_model=MessageResponse)
def post_sign_out(
    response: Response,
    settings: Annotated[Settings, Depends(get_settings)],
) -> MessageResponse:
    """Clear the auth cookie. Stateless: there is no server-side session to end."""
    clear_cookie(response, settings.AUTH_COOKIE_NAME, settings)
    logger.info("User signed out successfully")
    return MessageResponse(message="User signed out successfully")


def get_token_claims(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
) -> TokenClaims:
    """
    Dependency: require a valid token in the auth cookie and return its claims.
    Raises 401 if the cookie is missing or the token is invalid or expired.
    No route in this app depends on it; mount it on routes that need a signed-in user.
    """
    token = read_cookie(request, settings.AUTH_COOKIE_NAME)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    try:
        return decode_access_token(token, settings)
    except TokenInvalidError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
        ) from e
