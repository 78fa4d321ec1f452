"""gql-authz testing utilities — roles, assertions, reports, and fixtures.

Provides test helpers for verifying authorization rules:

- **Role factories**: ``make_role``, ``public_role``, ``owner_role`` ...
- **Assertion helpers**: ``assert_allowed``, ``assert_denied``,
  ``assert_authorizes``, ``assert_not_authorizes``.
- **Reports**: ``permission_report``, ``diff_matrices``.
- **Fixtures**: ``authz_config``, ``isolated_authz_config``.

Example::

    from gql_authz.testing import assert_authorizes, public_role

    def test_public_can_list(compiled):
        assert_authorizes(compiled.artifacts, "list", public_role())
"""

from gql_authz.testing._assertions import (
    assert_allowed,
    assert_authorizes,
    assert_denied,
    assert_not_authorizes,
)
from gql_authz.testing._fixtures import authz_config, isolated_authz_config
from gql_authz.testing._isolation import isolated_config
from gql_authz.testing._report import (
    MatrixDiff,
    PermissionCoverage,
    PermissionReport,
    diff_matrices,
    permission_report,
)
from gql_authz.testing._roles import group_role, make_role, owner_role, private_role, public_role

__all__ = [
    "MatrixDiff",
    "PermissionCoverage",
    "PermissionReport",
    "assert_allowed",
    "assert_authorizes",
    "assert_denied",
    "assert_not_authorizes",
    "authz_config",
    "diff_matrices",
    "group_role",
    "isolated_authz_config",
    "isolated_config",
    "make_role",
    "owner_role",
    "permission_report",
    "private_role",
    "public_role",
]
