"""Tests for _types.py — operation tables."""

from __future__ import annotations

import pytest

from gql_authz._types import (
    BASE_CONCRETE_OPERATIONS,
    DECLARATIVE_OPERATIONS,
    SUBSCRIPTION_SOURCES,
    concrete_operations,
    expand_operation,
)


class TestConcreteOperations:
    def test_base_set(self):
        assert concrete_operations() == BASE_CONCRETE_OPERATIONS

    def test_extended_reads_follow_list(self):
        ops = concrete_operations(("search", "sync"))
        assert ops[:4] == ("get", "list", "sync", "search")
        assert ops[4:] == BASE_CONCRETE_OPERATIONS[2:]

    def test_only_enabled_extended_reads(self):
        assert "search" not in concrete_operations(("sync",))


class TestExpandOperation:
    def test_read_expands_to_get_and_list(self):
        assert expand_operation("read") == ("get", "list")

    def test_read_includes_enabled_extended_reads(self):
        assert expand_operation("read", ("sync", "search")) == ("get", "list", "sync", "search")

    @pytest.mark.parametrize("op", ["get", "list", "create", "update", "delete"])
    def test_one_to_one(self, op: str):
        assert expand_operation(op) == (op,)

    def test_unknown_raises_key_error(self):
        with pytest.raises(KeyError):
            expand_operation("onCreate")


class TestTables:
    def test_subscriptions_are_not_declarative(self):
        assert not DECLARATIVE_OPERATIONS & set(SUBSCRIPTION_SOURCES)

    def test_get_never_grants_a_subscription(self):
        for sources in SUBSCRIPTION_SOURCES.values():
            assert "get" not in sources
            assert "list" in sources
