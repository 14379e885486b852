"""Tests for the app.scripts.create_user seeding CLI."""

import unittest
from unittest.mock import patch

from app.models import User
from app.scripts.create_user import main
from tests.support import make_session_factory


class TestCreateUser(unittest.TestCase):
    def setUp(self) -> None:
        self.session_factory = make_session_factory()
        patcher = patch("app.scripts.create_user.SessionLocal", self.session_factory)
        patcher.start()
        self.addCleanup(patcher.stop)

    def _users(self) -> list[User]:
        db = self.session_factory()
        try:
            return db.query(User).all()
        finally:
            db.close()

    def test_creates_admin(self) -> None:
        code = main(["Site Admin", "Admin@Example.com", "secure-password", "admin"])
        self.assertEqual(code, 0)
        users = self._users()
        self.assertEqual(len(users), 1)
        self.assertEqual(users[0].email, "admin@example.com")
        self.assertEqual(users[0].role, "admin")

    def test_duplicate_fails(self) -> None:
        self.assertEqual(main(["Ann", "ann@x.com", "secret1"]), 0)
        self.assertEqual(main(["Ann", "ann@x.com", "secret1"]), 1)
        self.assertEqual(len(self._users()), 1)

    def test_invalid_input_fails(self) -> None:
        self.assertEqual(main(["Ann", "not-an-email", "secret1"]), 1)
        self.assertEqual(self._users(), [])


if __name__ == "__main__":
    unittest.main()
