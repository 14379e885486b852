"""Health check endpoint for load balancers and container probes."""

import time
from datetime import UTC, datetime

from fastapi import APIRouter

from app.schemas.health import HealthResponse

router = APIRouter()

# Captured at import, i.e. process start for the server.
STARTED_AT = time.monotonic()


@router.get("", response_model=HealthResponse)
def get_health() -> HealthResponse:
    """Return service status, current UTC time and process uptime in seconds."""
    return HealthResponse(
        status="OK",
        timestamp=datetime.now(UTC).isoformat(),
        uptime=round(time.monotonic() - STARTED_AT, 3),
    )
