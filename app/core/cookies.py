"""Auth cookie helpers: one set of base attributes shared by set and clear."""

from typing import TYPE_CHECKING, Any

from fastapi import Request, Response

if TYPE_CHECKING:
    from app.core.config import Settings


def cookie_options(settings: "Settings", **overrides: Any) -> dict[str, Any]:
    """
    Base cookie attributes merged with overrides.

    httponly is always on, secure only in prod, samesite strict,
    max_age from AUTH_COOKIE_MAX_AGE_SECONDS.
    """
    options: dict[str, Any] = {
        "httponly": True,
        "secure": settings.is_production,
        "samesite": "strict",
        "max_age": settings.AUTH_COOKIE_MAX_AGE_SECONDS,
        "path": "/",
    }
    options.update(overrides)
    return options


def set_cookie(
    response: Response, name: str, value: str, settings: "Settings", **overrides: Any
) -> None:
    """Attach a Set-Cookie header for name=value with the base options."""
    response.set_cookie(key=name, value=value, **cookie_options(settings, **overrides))


def clear_cookie(
    response: Response, name: str, settings: "Settings", **overrides: Any
) -> None:
    """Attach an expiring Set-Cookie header for name using the same base options."""
    options = cookie_options(settings, **overrides)
    # delete_cookie always sends Max-Age=0
    options.pop("max_age", None)
    response.delete_cookie(key=name, **options)


def read_cookie(request: Request, name: str) -> str | None:
    """Return the request's value for cookie name, or None when absent."""
    return request.cookies.get(name)
