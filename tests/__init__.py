"""Test package. Pins env so app settings never depend on a developer's .env."""

import os

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("JWT_SECRET", "test-secret-key-for-unit-tests-only")
