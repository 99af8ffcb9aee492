"""Offset pagination over SQLAlchemy select statements."""

import math
from collections.abc import Callable
from typing import Any, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from roles_api.application.dtos.pagination import PaginatedResult, PaginationMeta

T = TypeVar("T")


def build_meta(total: int, page: int, per_page: int) -> PaginationMeta:
    """Compute page metadata. total_pages is 0 when there are no rows."""
    total_pages = math.ceil(total / per_page) if total else 0
    return PaginationMeta(
        total=total,
        total_pages=total_pages,
        current_page=page,
        per_page=per_page,
        prev=page - 1 if page > 1 else None,
        next=page + 1 if page < total_pages else None,
    )


class Paginator:
    """Runs a count query and a page query for a statement.

    per_page is the default page size when a call does not pass one.
    Pages are 1-based; values below 1 are treated as the first page.
    """

    def __init__(self, per_page: int = 10) -> None:
        if per_page < 1:
            raise ValueError(f"per_page must be >= 1, got: {per_page}")
        self.per_page = per_page

    async def paginate(
        self,
        session: AsyncSession,
        stmt: Select[Any],
        *,
        page: int | None = None,
        per_page: int | None = None,
        transform: Callable[[Any], T],
    ) -> PaginatedResult[T]:
        """Return one page of stmt's rows, mapped with transform, plus metadata."""
        page = page if page and page > 0 else 1
        per_page = per_page if per_page and per_page > 0 else self.per_page

        count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
        total = (await session.execute(count_stmt)).scalar_one()

        result = await session.execute(
            stmt.offset((page - 1) * per_page).limit(per_page)
        )
        data = [transform(row) for row in result.scalars().all()]
        return PaginatedResult(data=data, meta=build_meta(total, page, per_page))
