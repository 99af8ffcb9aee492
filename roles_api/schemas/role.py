"""Role API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from roles_api.schemas.pagination import PaginationMetaResponse


class RoleCreateRequest(BaseModel):
    """Request body for creating a role."""

    name: str = Field(..., min_length=1, max_length=255)


class RoleUpdateRequest(BaseModel):
    """Request body for renaming a role."""

    name: str = Field(..., min_length=1, max_length=255)


class RoleResponse(BaseModel):
    """Role list/create/update/delete response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    created_at: datetime
    updated_at: datetime


class RoleDetailResponse(RoleResponse):
    """Role detail response: role plus permission names."""

    permissions: list[str]


class RoleListResponse(BaseModel):
    """Paginated list of roles."""

    model_config = ConfigDict(from_attributes=True)

    data: list[RoleResponse]
    meta: PaginationMetaResponse
