"""Role ORM model."""

from typing import TYPE_CHECKING

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from roles_api.infrastructure.persistence.database import Base
from roles_api.infrastructure.persistence.models.mixins import BaseModelMixin

if TYPE_CHECKING:
    from roles_api.infrastructure.persistence.models.permission import RoleHasPermission


class Role(BaseModelMixin, Base):
    """Role. Table: role. Unique name."""

    __tablename__ = "role"

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    permissions: Mapped[list["RoleHasPermission"]] = relationship(
        back_populates="role",
        lazy="raise",
        passive_deletes="all",
    )

    __table_args__ = (UniqueConstraint("name", name="uq_role_name"),)
