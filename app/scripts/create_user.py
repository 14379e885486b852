"""
Create a user (e.g. first admin). Run from project root:
  python -m app.scripts.create_user NAME EMAIL PASSWORD [role]
Example:
  python -m app.scripts.create_user "Site Admin" admin@example.com your-secure-password admin
"""
import argparse
import sys

from app.core.database import SessionLocal
from app.models.user import ROLES
from app.schemas.auth import SignUpRequest
from app.services.auth import DuplicateEmailError, sign_up
from app.services.validation import validate


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a user without going through the API.")
    parser.add_argument("name", help="Display name (2-255 chars)")
    parser.add_argument("email", help="Email address")
    parser.add_argument("password", help="Password (6-72 chars, at most 72 UTF-8 bytes)")
    parser.add_argument("role", nargs="?", default="user", choices=ROLES)
    args = parser.parse_args(argv)

    result = validate(
        SignUpRequest,
        {"name": args.name, "email": args.email, "password": args.password, "role": args.role},
    )
    if not result.ok:
        print(f"Invalid input: {result.message}", file=sys.stderr)
        return 1
    body = result.data

    db = SessionLocal()
    try:
        user = sign_up(
            db, name=body.name, email=body.email, password=body.password, role=body.role
        )
    except DuplicateEmailError:
        print(f"User '{body.email}' already exists.", file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{user.email}' (id={user.id}) with role '{user.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
