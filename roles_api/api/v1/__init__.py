"""API v1."""

from roles_api.api.v1.router import api_router

__all__ = ["api_router"]
