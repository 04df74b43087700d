"""
Web service launcher
"""

import uvicorn

from stockscope.core.config import get_settings


def stockscope_main() -> None:
    """Start the FastAPI web service."""

    settings = get_settings()
    uvicorn.run(
        "stockscope.web.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.logging.level.lower(),
    )


if __name__ == "__main__":
    stockscope_main()
