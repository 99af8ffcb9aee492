"""Persistence repositories. Re-exports for dependency injection."""

from roles_api.infrastructure.persistence.repositories.base import BaseRepository
from roles_api.infrastructure.persistence.repositories.role_repo import RoleRepository

__all__ = [
    "BaseRepository",
    "RoleRepository",
]
