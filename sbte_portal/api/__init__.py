"""API endpoints package."""

from sbte_portal.api.router import API_PREFIX, create_api_router

__all__ = ["API_PREFIX", "create_api_router"]
