"""Application DTOs (no ORM dependency)."""

from roles_api.application.dtos.pagination import PaginatedResult, PaginationMeta
from roles_api.application.dtos.role import (
    RoleCreate,
    RoleDetailResult,
    RoleFilter,
    RoleOrdering,
    RoleResult,
    RoleSortField,
    RoleUpdate,
)

__all__ = [
    "PaginatedResult",
    "PaginationMeta",
    "RoleCreate",
    "RoleDetailResult",
    "RoleFilter",
    "RoleOrdering",
    "RoleResult",
    "RoleSortField",
    "RoleUpdate",
]
