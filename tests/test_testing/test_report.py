"""Tests for gql_authz.testing._report — coverage report and matrix diff."""

from __future__ import annotations

from gql_authz.rules._base import Rule, TypeDescriptor
from gql_authz.rules._normalizer import normalize_type
from gql_authz.testing._report import (
    MatrixDiff,
    PermissionCoverage,
    diff_matrices,
    permission_report,
)
from tests.conftest import ADMINS, OWNER, PUBLIC, make_type


class TestPermissionReport:
    def test_one_entry_per_role_and_operation(self, post_type: TypeDescriptor) -> None:
        matrix = normalize_type(post_type)
        report = permission_report(matrix)
        assert len(report.entries) == len(matrix.roles) * len(matrix.operations)

    def test_field_level_entry(self, post_type: TypeDescriptor) -> None:
        report = permission_report(normalize_type(post_type))
        entry = next(e for e in report.entries if e.role == PUBLIC and e.operation == "get")
        assert entry == PermissionCoverage(
            role=PUBLIC,
            operation="get",
            allowed_fields=("id", "title"),
            field_level=True,
        )

    def test_type_level_entry(self, post_type: TypeDescriptor) -> None:
        report = permission_report(normalize_type(post_type))
        entry = next(e for e in report.entries if e.role == OWNER and e.operation == "delete")
        assert entry.allowed_fields == ("id", "title", "content", "owner")
        assert entry.field_level is False

    def test_subscription_rows_are_inherited(self) -> None:
        report = permission_report(normalize_type(make_type(Rule(PUBLIC, ["list"]))))
        entry = next(e for e in report.entries if e.operation == "onUpdate")
        assert entry.allowed_fields == ("id", "name")

    def test_without_subscriptions(self) -> None:
        report = permission_report(
            normalize_type(make_type(Rule(PUBLIC, ["read"]))), subscriptions=False
        )
        assert "onCreate" not in report.operations
        assert {e.operation for e in report.entries} == {
            "get",
            "list",
            "create",
            "update",
            "delete",
        }

    def test_unreachable_operations(self) -> None:
        report = permission_report(normalize_type(make_type(Rule(PUBLIC, ["get"]))))
        assert report.unreachable_operations == (
            "list",
            "create",
            "update",
            "delete",
            "onCreate",
            "onUpdate",
            "onDelete",
        )

    def test_empty_matrix_is_all_unreachable(self) -> None:
        matrix = normalize_type(make_type())
        report = permission_report(matrix)
        assert report.entries == []
        assert report.unreachable_operations == matrix.operations

    def test_summary(self, post_type: TypeDescriptor) -> None:
        summary = permission_report(normalize_type(post_type)).summary
        assert summary.startswith("Permissions for Post")
        assert "id, title" in summary
        assert "(all)" in summary
        assert "(none)" in summary


class TestDiffMatrices:
    def test_identical_matrices(self, post_type: TypeDescriptor) -> None:
        diff = diff_matrices(normalize_type(post_type), normalize_type(post_type))
        assert not diff.has_changes
        assert str(diff) == "  (no changes)"

    def test_widened_access(self) -> None:
        old = normalize_type(make_type(Rule(PUBLIC, ["get"])))
        new = normalize_type(
            make_type(Rule(PUBLIC, ["get"]), Rule(PUBLIC, ["list"], fields=["id"]))
        )
        diff = diff_matrices(old, new)
        assert diff.added == ((PUBLIC, "id", "list"),)
        assert diff.removed == ()
        assert diff.changed_roles == frozenset({PUBLIC})

    def test_narrowed_access(self) -> None:
        old = normalize_type(make_type(Rule(ADMINS, ["update"])))
        new = normalize_type(make_type(Rule(ADMINS, ["update"], fields=["name"])))
        diff = diff_matrices(old, new)
        assert diff.added == ()
        assert diff.removed == ((ADMINS, "id", "update"),)

    def test_str_lists_changes(self) -> None:
        diff = MatrixDiff(
            added=((PUBLIC, "id", "list"),),
            removed=((OWNER, "name", "delete"),),
        )
        assert str(diff) == f"  + {PUBLIC} list id\n  - {OWNER} delete name"
