"""Shared test helpers: in-memory SQLite database and an app client with overridden dependencies."""

from collections.abc import Generator

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.main import app
from app.models import Base


def make_settings(**overrides: object) -> Settings:
    """Build Settings for tests (APP_ENV=test unless overridden)."""
    values: dict[str, object] = {
        "APP_ENV": "test",
        "JWT_SECRET": "test-secret-key-for-unit-tests-only",
    }
    values.update(overrides)
    return Settings(**values)


def make_session_factory() -> sessionmaker[Session]:
    """Fresh in-memory SQLite database with all tables created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def build_client(
    session_factory: sessionmaker[Session],
    settings: Settings | None = None,
    raise_server_exceptions: bool = True,
) -> TestClient:
    """TestClient for app.main.app wired to session_factory and settings. Call clear_overrides() after."""
    app_settings = settings or make_settings()

    def override_get_db() -> Generator[Session, None, None]:
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: app_settings
    return TestClient(app, raise_server_exceptions=raise_server_exceptions)


def clear_overrides() -> None:
    app.dependency_overrides.clear()


def set_cookie_headers(response) -> list[str]:
    """All Set-Cookie header values of an httpx response."""
    return response.headers.get_list("set-cookie")
