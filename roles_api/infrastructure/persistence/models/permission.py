"""Permission and RoleHasPermission ORM models.

Permissions are owned by a separate resource; this service only reads
them through the role_has_permission join.
"""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from roles_api.infrastructure.persistence.database import Base
from roles_api.infrastructure.persistence.models.mixins import (
    BaseModelMixin,
    TimestampMixin,
)

if TYPE_CHECKING:
    from roles_api.infrastructure.persistence.models.role import Role


class Permission(BaseModelMixin, Base):
    """Permission. Table: permission. Unique name."""

    __tablename__ = "permission"

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (UniqueConstraint("name", name="uq_permission_name"),)


class RoleHasPermission(TimestampMixin, Base):
    """Many-to-many role-permission. Table: role_has_permission.

    Both foreign keys RESTRICT deletes: a role or permission that is still
    assigned cannot be removed.
    """

    __tablename__ = "role_has_permission"

    role_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("role.id", ondelete="RESTRICT"), primary_key=True
    )
    permission_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("permission.id", ondelete="RESTRICT"), primary_key=True
    )

    role: Mapped["Role"] = relationship(back_populates="permissions", lazy="raise")
    permission: Mapped["Permission"] = relationship(lazy="raise")
