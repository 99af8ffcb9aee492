"""Pydantic request/response schemas for the API."""

from roles_api.schemas.health import HealthResponse
from roles_api.schemas.pagination import PaginationMetaResponse
from roles_api.schemas.role import (
    RoleCreateRequest,
    RoleDetailResponse,
    RoleListResponse,
    RoleResponse,
    RoleUpdateRequest,
)

__all__ = [
    "HealthResponse",
    "PaginationMetaResponse",
    "RoleCreateRequest",
    "RoleDetailResponse",
    "RoleListResponse",
    "RoleResponse",
    "RoleUpdateRequest",
]
