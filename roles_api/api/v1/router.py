"""API v1 router aggregation."""

from fastapi import APIRouter

from roles_api.api.v1.endpoints import health, roles

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(roles.router, prefix="/roles", tags=["roles"])
