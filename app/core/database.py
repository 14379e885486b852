"""PostgreSQL connection and session management."""

from collections.abc import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import Settings, settings


def create_db_engine(app_settings: Settings) -> Engine:
    """Build the process-wide pooled engine for DATABASE_URL."""
    return create_engine(
        app_settings.DATABASE_URL,
        pool_pre_ping=True,
        echo=app_settings.DEBUG,
    )


engine = create_db_engine(settings)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Dependency that yields a DB session and closes it when done."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
