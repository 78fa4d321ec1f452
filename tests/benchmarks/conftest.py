"""Benchmark fixtures — wide types and multi-type schemas."""

from __future__ import annotations

import pytest

from gql_authz.rules._base import Rule, TypeDescriptor
from gql_authz.rules._normalizer import normalize_type

# ---------------------------------------------------------------------------
# Descriptor builders
# ---------------------------------------------------------------------------


def _make_wide_type(name: str, field_count: int, role_count: int) -> TypeDescriptor:
    """A type with *field_count* fields and a mix of type- and field-level rules."""
    fields = tuple(f"field{i}" for i in range(field_count))
    rules: list[Rule] = [Rule("apiKey:public", ["read"])]
    for i in range(role_count):
        role = f"userPools:staticGroup:Group{i}"
        rules.append(Rule(role, ["create", "update"], fields=fields[i % field_count :: 2]))
        rules.append(Rule(role, ["get"]))
    rules.append(Rule("userPools:owner:owner", ["read", "create", "update", "delete"]))
    return TypeDescriptor(name=name, fields=fields, rules=tuple(rules))


def _make_schema(type_count: int) -> list[TypeDescriptor]:
    return [_make_wide_type(f"Type{i}", field_count=20, role_count=5) for i in range(type_count)]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(scope="module")
def small_type() -> TypeDescriptor:
    return _make_wide_type("Small", field_count=5, role_count=2)


@pytest.fixture(scope="module")
def wide_type() -> TypeDescriptor:
    return _make_wide_type("Wide", field_count=200, role_count=20)


@pytest.fixture(scope="module")
def wide_matrix(wide_type: TypeDescriptor):
    return normalize_type(wide_type)


@pytest.fixture(scope="module")
def schema_50() -> list[TypeDescriptor]:
    return _make_schema(50)
