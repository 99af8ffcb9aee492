"""Persistence models: ORM entities and mixins."""

from roles_api.infrastructure.persistence.models.mixins import (
    BaseModelMixin,
    IntegerIdMixin,
    TimestampMixin,
)
from roles_api.infrastructure.persistence.models.permission import (
    Permission,
    RoleHasPermission,
)
from roles_api.infrastructure.persistence.models.role import Role

__all__ = [
    "Role",
    "Permission",
    "RoleHasPermission",
    "IntegerIdMixin",
    "TimestampMixin",
    "BaseModelMixin",
]
