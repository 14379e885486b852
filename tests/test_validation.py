"""Unit tests for app.services.validation against the auth request schemas."""

import unittest

from app.schemas.auth import SignInRequest, SignUpRequest
from app.services.validation import format_validation_errors, validate


class TestSignUpValidation(unittest.TestCase):
    """validate(SignUpRequest, body)."""

    def test_valid_body_is_normalized(self) -> None:
        result = validate(
            SignUpRequest,
            {"name": "  Ann ", "email": " Ann@X.com ", "password": "secret1"},
        )
        self.assertTrue(result.ok)
        self.assertEqual(result.data.name, "Ann")
        self.assertEqual(result.data.email, "ann@x.com")
        self.assertEqual(result.data.role, "user")
        self.assertEqual(result.message, "")

    def test_explicit_role(self) -> None:
        result = validate(
            SignUpRequest,
            {"name": "Ann", "email": "ann@x.com", "password": "secret1", "role": "admin"},
        )
        self.assertTrue(result.ok)
        self.assertEqual(result.data.role, "admin")

    def test_unknown_role_rejected(self) -> None:
        result = validate(
            SignUpRequest,
            {"name": "Ann", "email": "ann@x.com", "password": "secret1", "role": "root"},
        )
        self.assertFalse(result.ok)
        self.assertIsNone(result.data)
        self.assertTrue(result.message.startswith("role: "))

    def test_every_issue_is_reported_in_field_order(self) -> None:
        result = validate(SignUpRequest, {"name": "A", "email": "nope", "password": "123"})
        self.assertFalse(result.ok)
        self.assertTrue(result.message.startswith("name: "))
        self.assertIn("email: ", result.message)
        self.assertIn("password: ", result.message)
        self.assertLess(result.message.index("name: "), result.message.index("email: "))
        self.assertLess(result.message.index("email: "), result.message.index("password: "))

    def test_message_is_deterministic(self) -> None:
        body = {"email": "nope"}
        self.assertEqual(
            validate(SignUpRequest, body).message,
            validate(SignUpRequest, body).message,
        )

    def test_missing_fields(self) -> None:
        result = validate(SignUpRequest, {})
        self.assertFalse(result.ok)
        self.assertIn("name: Field required", result.message)
        self.assertIn("email: Field required", result.message)
        self.assertIn("password: Field required", result.message)

    def test_overlong_email_rejected(self) -> None:
        email = "a" * 60 + "@" + ".".join(["b" * 60] * 4) + ".com"
        result = validate(SignUpRequest, {"name": "Ann", "email": email, "password": "secret1"})
        self.assertFalse(result.ok)
        self.assertIn("email: ", result.message)

    def test_non_object_body(self) -> None:
        for body in (None, [], "text", 3):
            result = validate(SignUpRequest, body)
            self.assertFalse(result.ok)
            self.assertTrue(result.message.startswith("body: "))

    def test_password_over_72_bytes_rejected(self) -> None:
        base = {"name": "Ann", "email": "ann@x.com"}
        self.assertTrue(validate(SignUpRequest, {**base, "password": "a" * 72}).ok)
        result = validate(SignUpRequest, {**base, "password": "a" * 73})
        self.assertFalse(result.ok)
        self.assertTrue(result.message.startswith("password: "))
        # 37 characters, 74 bytes
        result = validate(SignUpRequest, {**base, "password": "\u00e9" * 37})
        self.assertFalse(result.ok)
        self.assertIn("72 bytes", result.message)

    def test_raw_json_body(self) -> None:
        raw = b'{"name": "Ann", "email": "ANN@x.com", "password": "secret1"}'
        result = validate(SignUpRequest, raw)
        self.assertTrue(result.ok, result.message)
        self.assertEqual(result.data.email, "ann@x.com")
        self.assertEqual(result.data.role, "user")

    def test_malformed_json_is_a_body_issue(self) -> None:
        for raw in (b'{"name": "Ann",', b"", b"not json"):
            result = validate(SignUpRequest, raw)
            self.assertFalse(result.ok)
            self.assertTrue(result.message.startswith("body: Invalid JSON"), result.message)

    def test_raw_non_object_json_is_a_body_issue(self) -> None:
        result = validate(SignUpRequest, b"[1, 2]")
        self.assertFalse(result.ok)
        self.assertTrue(result.message.startswith("body: "), result.message)


class TestSignInValidation(unittest.TestCase):
    """validate(SignInRequest, body)."""

    def test_valid(self) -> None:
        result = validate(SignInRequest, {"email": "ANN@x.com", "password": "x"})
        self.assertTrue(result.ok)
        self.assertEqual(result.data.email, "ann@x.com")

    def test_empty_password_rejected(self) -> None:
        result = validate(SignInRequest, {"email": "ann@x.com", "password": ""})
        self.assertFalse(result.ok)
        self.assertTrue(result.message.startswith("password: "))


class TestFormatValidationErrors(unittest.TestCase):
    def test_joins_field_and_message(self) -> None:
        errors = [
            {"loc": ("email",), "msg": "bad email"},
            {"loc": ("password",), "msg": "too short"},
            {"loc": (), "msg": "not an object"},
        ]
        self.assertEqual(
            format_validation_errors(errors),
            "email: bad email, password: too short, body: not an object",
        )


if __name__ == "__main__":
    unittest.main()
