"""DTOs for role use cases (no dependency on ORM or presentation schemas)."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum


@dataclass(frozen=True)
class RoleCreate:
    """Input for creating a role (write-model)."""

    name: str


@dataclass(frozen=True)
class RoleUpdate:
    """Input for renaming a role (write-model)."""

    name: str


@dataclass(frozen=True)
class RoleResult:
    """Role read-model (result of create, update, remove and list)."""

    id: int
    name: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class RoleDetailResult:
    """Role with its permission names flattened from the role-permission join."""

    id: int
    name: str
    created_at: datetime
    updated_at: datetime
    permissions: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class RoleFilter:
    """Filter for listing roles. Unset fields do not constrain the query."""

    name: str | None = None
    name_contains: str | None = None
    created_after: datetime | None = None
    created_before: datetime | None = None


class RoleSortField(StrEnum):
    """Role columns that listing may be ordered by."""

    ID = "id"
    NAME = "name"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"


@dataclass(frozen=True)
class RoleOrdering:
    """One ordering term: field plus direction."""

    field: RoleSortField
    descending: bool = False

    @classmethod
    def parse(cls, raw: str) -> "RoleOrdering":
        """Parse 'name' or '-created_at' (leading '-' means descending).

        Raises:
            ValueError: If the field is not a sortable role column.
        """
        raw = raw.strip()
        descending = raw.startswith("-")
        name = raw[1:] if descending else raw
        try:
            sort_field = RoleSortField(name)
        except ValueError:
            allowed = ", ".join(f.value for f in RoleSortField)
            raise ValueError(f"Cannot order roles by '{name}'; allowed: {allowed}") from None
        return cls(field=sort_field, descending=descending)
