"""User persistence: lookup by email and insert. The only two queries the auth flows need."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.user import User
from app.schemas.auth import PublicUser


def find_user_by_email(db: Session, email: str) -> User | None:
    """Return the user with this email (unique index), or None."""
    return db.query(User).filter(User.email == email).first()


def insert_user(
    db: Session,
    *,
    name: str,
    email: str,
    password_hash: str,
    role: str,
) -> PublicUser:
    """
    Insert a new user row and return its public projection.

    Rolls back and re-raises IntegrityError when the email unique constraint fires.
    """
    user = User(name=name, email=email, password_hash=password_hash, role=role)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise
    db.refresh(user)
    return PublicUser.model_validate(user)
