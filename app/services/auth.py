"""Sign-up and sign-in flows: one lookup, one guard, at most one write, public projection out."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.security import hash_password, verify_password
from app.models.user import ROLE_USER
from app.schemas.auth import PublicUser
from app.services.user_store import find_user_by_email, insert_user

logger = logging.getLogger(__name__)


class AuthServiceError(Exception):
    """Base for the expected, client-mappable outcomes of the auth flows."""

    def __init__(self, message: str, email: str) -> None:
        self.message = message
        self.email = email
        super().__init__(message)


class DuplicateEmailError(AuthServiceError):
    """Sign-up with an email that is already registered."""

    def __init__(self, email: str) -> None:
        super().__init__("User with this email already exists", email)


class UserNotFoundError(AuthServiceError):
    """Sign-in with an email that has no account."""

    def __init__(self, email: str) -> None:
        super().__init__("User not found", email)


class InvalidPasswordError(AuthServiceError):
    """Sign-in with a wrong password for an existing account."""

    def __init__(self, email: str) -> None:
        super().__init__("Invalid password", email)


def sign_up(
    db: Session,
    *,
    name: str,
    email: str,
    password: str,
    role: str = ROLE_USER,
) -> PublicUser:
    """
    Register a new user and return its public fields.

    Raises DuplicateEmailError when the email exists, including when a concurrent
    sign-up wins the race and the insert hits the unique constraint.
    HashingError from the hasher propagates.
    """
    if find_user_by_email(db, email) is not None:
        raise DuplicateEmailError(email)

    password_hash = hash_password(password)
    try:
        user = insert_user(
            db, name=name, email=email, password_hash=password_hash, role=role
        )
    except IntegrityError as e:
        raise DuplicateEmailError(email) from e

    logger.info("User %s created successfully (id=%s)", user.email, user.id)
    return user


def sign_in(db: Session, *, email: str, password: str) -> PublicUser:
    """
    Check credentials and return the user's public fields.

    Raises UserNotFoundError or InvalidPasswordError; callers should not
    tell the two apart in client responses.
    """
    user = find_user_by_email(db, email)
    if user is None:
        raise UserNotFoundError(email)
    if not verify_password(password, user.password_hash):
        raise InvalidPasswordError(email)

    logger.info("User %s authenticated successfully", user.email)
    return PublicUser.model_validate(user)
