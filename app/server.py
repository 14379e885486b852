"""
Run the API with uvicorn on HOST:PORT:

  python -m app.server
"""

import sys

import uvicorn

from app.core.config import get_settings


def main() -> int:
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.APP_ENV == "dev",
        log_level=settings.LOG_LEVEL,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
