"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from app.api import health
from app.api import router as api_router
from app.core.config import settings
from app.core.logging import configure_logging
from app.core.middleware import register_middleware

configure_logging(settings)
logger = logging.getLogger(__name__)

if settings.AUTH_COOKIE_MAX_AGE_SECONDS != settings.JWT_EXPIRE_MINUTES * 60:
    logger.warning(
        "Auth cookie max age (%ss) differs from token lifetime (%ss); "
        "set AUTH_COOKIE_MAX_AGE_SECONDS and JWT_EXPIRE_MINUTES to agree",
        settings.AUTH_COOKIE_MAX_AGE_SECONDS,
        settings.JWT_EXPIRE_MINUTES * 60,
    )

app = FastAPI(
    title="Auth API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

register_middleware(app)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/", response_class=PlainTextResponse)
def root() -> str:
    """Root route; plain-text greeting."""
    logger.info("Hello from Auth API!")
    return "Hello from Auth API!"


@app.get(settings.API_PREFIX)
def api_root() -> dict[str, str]:
    """API discovery route."""
    return {"message": "API is running"}
