"""FastAPI application factory."""

from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI

from sbte_portal.api import create_api_router
from sbte_portal.config import get_settings
from sbte_portal.utils.db import close_db, init_db
from sbte_portal.utils.exception_handlers import register_exception_handlers
from sbte_portal.utils.logging import RequestContextMiddleware

# Create main router
router = APIRouter()


@router.get("/")
async def root():
    """Root endpoint."""
    return {"message": "SBTE Portal API", "version": get_settings().API_VERSION}


@router.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    await init_db()
    yield
    await close_db()


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.API_TITLE,
        description="Subject and department management for SBTE colleges",
        version=settings.API_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    app.add_middleware(RequestContextMiddleware)
    register_exception_handlers(app)

    app.include_router(router)
    app.include_router(create_api_router())

    return app
