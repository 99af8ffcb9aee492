"""Role application service: list, create, find by id, update and remove roles."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from roles_api.application.dtos.pagination import PaginatedResult
from roles_api.application.dtos.role import (
    RoleCreate,
    RoleDetailResult,
    RoleFilter,
    RoleOrdering,
    RoleResult,
    RoleUpdate,
)
from roles_api.domain.exceptions import ResourceNotFoundException
from roles_api.infrastructure.persistence.errors import raise_persistence_error
from roles_api.shared.telemetry.logging import get_logger
from roles_api.shared.utils.datetime import ensure_utc

logger = get_logger(__name__)

_RESOURCE = "Role"


def _permission_names(links: Iterable[Any] | None) -> list[str]:
    """Flatten role-permission links to permission names; links without a permission are skipped."""
    names: list[str] = []
    for link in links or ():
        permission = link.permission if link is not None else None
        if permission is not None:
            names.append(permission.name)
    return names


class RoleService:
    """CRUD over roles. Holds one collaborator, the role repository (persistence client).

    Write operations route persistence errors through raise_persistence_error,
    which either raises a domain exception or re-raises the original error.
    """

    def __init__(self, role_repo: Any) -> None:
        self._role_repo = role_repo

    async def list_roles(
        self,
        *,
        where: RoleFilter | None = None,
        order_by: Sequence[RoleOrdering] | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> PaginatedResult[RoleResult]:
        """Return one page of roles matching where, ordered by order_by."""
        return await self._role_repo.list_page(
            where=where, order_by=order_by, page=page, per_page=per_page
        )

    async def create(self, data: RoleCreate) -> RoleResult:
        """Create a role.

        Raises:
            ConflictException: A role with this name already exists.
        """
        try:
            created = await self._role_repo.create_role(data.name)
        except Exception as e:
            raise_persistence_error(e, _RESOURCE)
        logger.info("Role created: id=%s name=%s", created.id, created.name)
        return created

    async def find_by_id(self, role_id: int) -> RoleDetailResult:
        """Return the role with its permission names.

        Raises:
            ResourceNotFoundException: No role with role_id.
        """
        role = await self._role_repo.get_with_permissions(role_id)
        if role is None:
            raise ResourceNotFoundException(_RESOURCE, role_id)
        return RoleDetailResult(
            id=role.id,
            name=role.name,
            created_at=ensure_utc(role.created_at),
            updated_at=ensure_utc(role.updated_at),
            permissions=_permission_names(role.permissions),
        )

    async def update(self, role_id: int, data: RoleUpdate) -> RoleResult:
        """Rename a role and stamp updated_at.

        Raises:
            ResourceNotFoundException: No role with role_id.
            ConflictException: Another role already has this name.
        """
        try:
            updated = await self._role_repo.rename(role_id, data.name)
        except Exception as e:
            raise_persistence_error(e, _RESOURCE, role_id)
        logger.info("Role updated: id=%s name=%s", updated.id, updated.name)
        return updated

    async def remove(self, role_id: int) -> RoleResult:
        """Delete a role and return its last state.

        Raises:
            ResourceNotFoundException: No role with role_id.
            ReferentialIntegrityException: The role still has permission assignments.
        """
        try:
            removed = await self._role_repo.delete_role(role_id)
        except Exception as e:
            raise_persistence_error(e, _RESOURCE, role_id)
        logger.info("Role removed: id=%s name=%s", removed.id, removed.name)
        return removed
