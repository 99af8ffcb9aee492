"""Unit tests for role DTO helpers (ordering parsing)."""

import pytest

from roles_api.application.dtos.role import RoleOrdering, RoleSortField


class TestRoleOrderingParse:
    """Tests for RoleOrdering.parse."""

    def test_ascending(self) -> None:
        assert RoleOrdering.parse("name") == RoleOrdering(RoleSortField.NAME)

    def test_descending_prefix(self) -> None:
        assert RoleOrdering.parse("-created_at") == RoleOrdering(
            RoleSortField.CREATED_AT, descending=True
        )

    def test_whitespace_stripped(self) -> None:
        assert RoleOrdering.parse(" id ").field is RoleSortField.ID

    def test_unknown_field_raises(self) -> None:
        with pytest.raises(ValueError, match="Cannot order roles by 'secret'"):
            RoleOrdering.parse("-secret")
