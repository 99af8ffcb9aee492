"""SQLAlchemy mixins for common model patterns.

Provides: IntegerIdMixin, TimestampMixin, and the combined BaseModelMixin.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from roles_api.shared.utils.datetime import utc_now


class IntegerIdMixin:
    """Mixin for models keyed by an autoincrementing integer id."""

    @declared_attr
    def id(cls) -> Mapped[int]:
        return mapped_column(Integer, primary_key=True, autoincrement=True)


class TimestampMixin:
    """Mixin for created_at and updated_at (timezone-aware, UTC).

    Python-side defaults keep values set when the row is inserted through
    the ORM; server defaults cover rows written outside it.
    """

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            default=utc_now,
            server_default=func.now(),
            nullable=False,
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            default=utc_now,
            server_default=func.now(),
            onupdate=utc_now,
            nullable=False,
        )


class BaseModelMixin(IntegerIdMixin, TimestampMixin):
    """Combined mixin: integer id + created_at/updated_at."""

    __abstract__ = True
