"""API router factory with core endpoints."""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from sbte_portal.api.subjects import router as subjects_router
from sbte_portal.utils.db import db_manager

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


def create_api_router() -> APIRouter:
    """Create router with all endpoints mounted under /api.

    Returns:
        APIRouter with health checks and subject/department endpoints.
    """
    router = APIRouter(prefix=API_PREFIX)

    @router.get("/health", tags=["Health"], status_code=status.HTTP_200_OK)
    async def health_check() -> dict:
        """Health check endpoint - basic application health."""
        return {"status": "healthy", "service": "sbte-portal"}

    @router.get(
        "/health/db",
        tags=["Health"],
        status_code=status.HTTP_200_OK,
        response_model=None,
    )
    async def health_check_db() -> JSONResponse:
        """Deep health check - includes database connectivity check."""
        try:
            await db_manager.verify_connection()
            return JSONResponse(
                status_code=status.HTTP_200_OK,
                content={"status": "healthy", "database": "connected"},
            )
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "unhealthy", "database": "disconnected"},
            )

    router.include_router(subjects_router)

    return router
