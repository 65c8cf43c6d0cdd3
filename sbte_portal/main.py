"""FastAPI application entry point."""

from sbte_portal.application import create_app
from sbte_portal.config import get_settings
from sbte_portal.utils.logging import setup_logging

# Setup logging before creating app
setup_logging()

# Create application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "sbte_portal.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
