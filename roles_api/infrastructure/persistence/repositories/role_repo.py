"""Role repository. Read methods return RoleResult (DTO); get_with_permissions returns ORM for projection."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from roles_api.application.dtos.pagination import PaginatedResult
from roles_api.application.dtos.role import (
    RoleFilter,
    RoleOrdering,
    RoleResult,
    RoleSortField,
)
from roles_api.infrastructure.persistence.models.permission import RoleHasPermission
from roles_api.infrastructure.persistence.models.role import Role
from roles_api.infrastructure.persistence.pagination import Paginator
from roles_api.infrastructure.persistence.repositories.base import BaseRepository
from roles_api.shared.utils.datetime import ensure_utc, utc_now

_SORT_COLUMNS = {
    RoleSortField.ID: Role.id,
    RoleSortField.NAME: Role.name,
    RoleSortField.CREATED_AT: Role.created_at,
    RoleSortField.UPDATED_AT: Role.updated_at,
}


def _role_to_result(r: Role) -> RoleResult:
    """Map ORM Role to application RoleResult."""
    return RoleResult(
        id=r.id,
        name=r.name,
        created_at=ensure_utc(r.created_at),
        updated_at=ensure_utc(r.updated_at),
    )


def _apply_filter(stmt: Select[tuple[Role]], where: RoleFilter | None) -> Select[tuple[Role]]:
    if where is None:
        return stmt
    if where.name is not None:
        stmt = stmt.where(Role.name == where.name)
    if where.name_contains:
        stmt = stmt.where(Role.name.icontains(where.name_contains, autoescape=True))
    if where.created_after is not None:
        stmt = stmt.where(Role.created_at >= where.created_after)
    if where.created_before is not None:
        stmt = stmt.where(Role.created_at < where.created_before)
    return stmt


def _apply_ordering(
    stmt: Select[tuple[Role]], order_by: Sequence[RoleOrdering] | None
) -> Select[tuple[Role]]:
    """Apply requested ordering; id is always the final tiebreaker so pages are stable."""
    terms = []
    for term in order_by or ():
        column = _SORT_COLUMNS[term.field]
        terms.append(column.desc() if term.descending else column.asc())
    if not any(t.field is RoleSortField.ID for t in order_by or ()):
        terms.append(Role.id.asc())
    return stmt.order_by(*terms)


class RoleRepository(BaseRepository[Role]):
    """Role persistence client: every method issues one round of queries on the session."""

    def __init__(self, db: AsyncSession, paginator: Paginator | None = None) -> None:
        super().__init__(db, Role)
        self.paginator = paginator or Paginator()

    async def list_page(
        self,
        *,
        where: RoleFilter | None = None,
        order_by: Sequence[RoleOrdering] | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> PaginatedResult[RoleResult]:
        stmt = _apply_ordering(_apply_filter(select(Role), where), order_by)
        return await self.paginator.paginate(
            self.db, stmt, page=page, per_page=per_page, transform=_role_to_result
        )

    async def create_role(self, name: str) -> RoleResult:
        """Insert a role; return read-model DTO."""
        created = await self.create(Role(name=name))
        return _role_to_result(created)

    async def get_with_permissions(self, role_id: int) -> Role | None:
        """Return role ORM with permissions -> permission eagerly loaded, or None."""
        return await self.get_by_id(
            role_id,
            selectinload(Role.permissions).selectinload(RoleHasPermission.permission),
        )

    async def rename(self, role_id: int, name: str) -> RoleResult:
        """Set name and stamp updated_at. Raises NoResultFound if the role does not exist."""
        updated = await self.update_by_id(role_id, name=name, updated_at=utc_now())
        return _role_to_result(updated)

    async def delete_role(self, role_id: int) -> RoleResult:
        """Delete the role; return its last state. Raises NoResultFound if it does not exist."""
        deleted = await self.delete_by_id(role_id)
        return _role_to_result(deleted)
