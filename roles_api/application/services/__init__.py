"""Application services."""

from roles_api.application.services.role_service import RoleService

__all__ = ["RoleService"]
