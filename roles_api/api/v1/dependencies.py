"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, the role repository and the
role service. Read routes get a plain session; write routes get a
transactional session (commit on success, rollback on error).
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from roles_api.application.services.role_service import RoleService
from roles_api.core.config import get_settings
from roles_api.infrastructure.persistence.database import (
    get_db,
    get_db_transactional,
)
from roles_api.infrastructure.persistence.pagination import Paginator
from roles_api.infrastructure.persistence.repositories import RoleRepository


def get_paginator() -> Paginator:
    """Paginator with the configured default page size."""
    return Paginator(per_page=get_settings().default_per_page)


async def get_role_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
    paginator: Annotated[Paginator, Depends(get_paginator)],
) -> RoleRepository:
    return RoleRepository(db, paginator)


async def get_role_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> RoleRepository:
    return RoleRepository(db)


async def get_role_service(
    role_repo: Annotated[RoleRepository, Depends(get_role_repo)],
) -> RoleService:
    """Role service for read routes."""
    return RoleService(role_repo)


async def get_role_service_for_write(
    role_repo: Annotated[RoleRepository, Depends(get_role_repo_for_write)],
) -> RoleService:
    """Role service for write routes (same transaction as the request)."""
    return RoleService(role_repo)
