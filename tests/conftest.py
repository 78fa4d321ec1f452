"""Shared test fixtures for gql-authz tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from gql_authz.config._config import _reset_global_config
from gql_authz.rules._base import Rule, TypeDescriptor

# ---------------------------------------------------------------------------
# Roles
# ---------------------------------------------------------------------------

PUBLIC = "apiKey:public"
OWNER = "userPools:owner:id"
PRIVATE = "userPools:private"
ADMINS = "userPools:staticGroup:Admin"

TEST_FIELDS = ("id", "name")
POST_FIELDS = ("id", "title", "content", "owner")


# ---------------------------------------------------------------------------
# Descriptor helpers
# ---------------------------------------------------------------------------


def make_type(
    *rules: Rule,
    name: str = "Test",
    fields: tuple[str, ...] = TEST_FIELDS,
    plural_name: str | None = None,
    subscriptions: bool | None = None,
) -> TypeDescriptor:
    """Build a TypeDescriptor with the given rules."""
    return TypeDescriptor(
        name=name,
        fields=fields,
        rules=rules,
        plural_name=plural_name,
        subscriptions=subscriptions,
    )


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _clean_global_config() -> Generator[None, None, None]:
    """Every test starts and ends with the default global config."""
    _reset_global_config()
    yield
    _reset_global_config()


@pytest.fixture()
def post_type() -> TypeDescriptor:
    """A Post type mixing type-level and field-level rules."""
    return make_type(
        Rule(PUBLIC, ["read"], fields=["id", "title"]),
        Rule(OWNER, ["read", "create", "update", "delete"]),
        Rule(ADMINS, ["update"], fields=["title", "content"]),
        name="Post",
        fields=POST_FIELDS,
    )
