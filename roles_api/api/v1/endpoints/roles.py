"""Roles API: list, get (with permission names), create, update, delete."""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from roles_api.api.v1.dependencies import get_role_service, get_role_service_for_write
from roles_api.application.dtos.role import (
    RoleCreate,
    RoleFilter,
    RoleOrdering,
    RoleUpdate,
)
from roles_api.application.services.role_service import RoleService
from roles_api.core.config import get_settings
from roles_api.domain.exceptions import ValidationException
from roles_api.schemas.role import (
    RoleCreateRequest,
    RoleDetailResponse,
    RoleListResponse,
    RoleResponse,
    RoleUpdateRequest,
)
from roles_api.shared.utils.datetime import ensure_utc

router = APIRouter()


def _parse_order_by(raw: str | None) -> list[RoleOrdering] | None:
    """Parse 'name,-created_at' into ordering terms; None when not given."""
    if not raw:
        return None
    try:
        return [RoleOrdering.parse(part) for part in raw.split(",") if part.strip()]
    except ValueError as e:
        raise ValidationException(str(e), field="order_by") from None


def _check_paging(page: int | None, per_page: int | None) -> None:
    """Reject out-of-range paging the same way for both bounds."""
    if page is not None and page < 1:
        raise ValidationException("page must be at least 1", field="page")
    if per_page is None:
        return
    max_per_page = get_settings().max_per_page
    if not 1 <= per_page <= max_per_page:
        raise ValidationException(
            f"per_page must be between 1 and {max_per_page}", field="per_page"
        )


@router.get("", response_model=RoleListResponse)
async def list_roles(
    service: Annotated[RoleService, Depends(get_role_service)],
    name: str | None = Query(None, description="Exact role name"),
    search: str | None = Query(None, description="Case-insensitive substring of the name"),
    created_after: datetime | None = Query(
        None, description="Only roles created at or after this instant"
    ),
    created_before: datetime | None = Query(
        None, description="Only roles created before this instant"
    ),
    order_by: str | None = Query(
        None, description="Comma-separated fields; prefix with '-' for descending"
    ),
    page: int | None = Query(None),
    per_page: int | None = Query(None),
):
    """List roles (paginated)."""
    _check_paging(page, per_page)
    where = RoleFilter(
        name=name,
        name_contains=search,
        created_after=ensure_utc(created_after),
        created_before=ensure_utc(created_before),
    )
    result = await service.list_roles(
        where=where,
        order_by=_parse_order_by(order_by),
        page=page,
        per_page=per_page,
    )
    return RoleListResponse.model_validate(result)


@router.post("", response_model=RoleResponse, status_code=201)
async def create_role(
    body: RoleCreateRequest,
    service: Annotated[RoleService, Depends(get_role_service_for_write)],
):
    """Create a role. 409 when the name is taken."""
    created = await service.create(RoleCreate(name=body.name))
    return RoleResponse.model_validate(created)


@router.get("/{role_id}", response_model=RoleDetailResponse)
async def get_role(
    role_id: int,
    service: Annotated[RoleService, Depends(get_role_service)],
):
    """Get role by id with the names of its permissions."""
    role = await service.find_by_id(role_id)
    return RoleDetailResponse.model_validate(role)


@router.patch("/{role_id}", response_model=RoleResponse)
async def update_role(
    role_id: int,
    body: RoleUpdateRequest,
    service: Annotated[RoleService, Depends(get_role_service_for_write)],
):
    """Rename a role. 404 when missing, 409 when the name is taken."""
    updated = await service.update(role_id, RoleUpdate(name=body.name))
    return RoleResponse.model_validate(updated)


@router.delete("/{role_id}", response_model=RoleResponse)
async def delete_role(
    role_id: int,
    service: Annotated[RoleService, Depends(get_role_service_for_write)],
):
    """Delete a role and return it. 404 when missing, 400 while permissions are still assigned."""
    removed = await service.remove(role_id)
    return RoleResponse.model_validate(removed)
