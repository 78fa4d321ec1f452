"""Shared type aliases and operation tables for gql-authz."""

from __future__ import annotations

from typing import Literal

__all__ = [
    "BASE_CONCRETE_OPERATIONS",
    "DECLARATIVE_OPERATIONS",
    "EXTENDED_READ_OPERATIONS",
    "READ_CONFLICTS",
    "SUBSCRIPTION_SOURCES",
    "ConcreteOperation",
    "DeclarativeOperation",
    "ExtendedReadOperation",
    "Role",
    "concrete_operations",
    "expand_operation",
]

# Roles are opaque; the compiler only compares them by value.
Role = str

# Valid values for CompilerConfig.extended_read_operations.
ExtendedReadOperation = Literal["sync", "search"]

DeclarativeOperation = Literal[
    "create",
    "update",
    "delete",
    "read",
    "get",
    "list",
    "sync",
    "search",
]

ConcreteOperation = Literal[
    "get",
    "list",
    "sync",
    "search",
    "create",
    "update",
    "delete",
    "onCreate",
    "onUpdate",
    "onDelete",
]

EXTENDED_READ_OPERATIONS: tuple[str, ...] = ("sync", "search")

DECLARATIVE_OPERATIONS: frozenset[str] = frozenset(
    {"create", "update", "delete", "read", "get", "list", *EXTENDED_READ_OPERATIONS}
)

# Concrete operations every matrix carries, in artifact emission order.
BASE_CONCRETE_OPERATIONS: tuple[str, ...] = (
    "get",
    "list",
    "create",
    "update",
    "delete",
    "onCreate",
    "onUpdate",
    "onDelete",
)

# Granular operations that may not share a rule with the "read" aggregate.
READ_CONFLICTS: tuple[str, ...] = ("get", "list")

# Subscription visibility: a role may observe an event if it holds any
# of these grants on the field. "get" alone never qualifies.
SUBSCRIPTION_SOURCES: dict[str, tuple[str, ...]] = {
    "onCreate": ("create", "list"),
    "onUpdate": ("update", "list"),
    "onDelete": ("delete", "list"),
}

_ONE_TO_ONE: dict[str, tuple[str, ...]] = {
    "get": ("get",),
    "list": ("list",),
    "create": ("create",),
    "update": ("update",),
    "delete": ("delete",),
    "sync": ("sync",),
    "search": ("search",),
}


def concrete_operations(extended_read: tuple[str, ...] = ()) -> tuple[str, ...]:
    """Return the full concrete operation set in emission order.

    Enabled extended read operations slot in directly after ``list``.

    Example::

        concrete_operations(("sync",))
        # ("get", "list", "sync", "create", ..., "onDelete")
    """
    extended = tuple(op for op in EXTENDED_READ_OPERATIONS if op in extended_read)
    return BASE_CONCRETE_OPERATIONS[:2] + extended + BASE_CONCRETE_OPERATIONS[2:]


def expand_operation(operation: str, extended_read: tuple[str, ...] = ()) -> tuple[str, ...]:
    """Map one declarative operation to its concrete operations.

    ``read`` expands to ``get`` and ``list`` plus any enabled extended
    read operations; everything else maps one-to-one.

    Raises:
        KeyError: If *operation* is not a declarative operation.
    """
    if operation == "read":
        return ("get", "list") + tuple(op for op in EXTENDED_READ_OPERATIONS if op in extended_read)
    return _ONE_TO_ONE[operation]
