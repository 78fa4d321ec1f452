"""Operation key naming for generated artifacts."""

from __future__ import annotations

__all__ = ["operation_key", "pluralize"]

_ROOT_TYPES: dict[str, str] = {
    "get": "Query",
    "list": "Query",
    "sync": "Query",
    "search": "Query",
    "create": "Mutation",
    "update": "Mutation",
    "delete": "Mutation",
    "onCreate": "Subscription",
    "onUpdate": "Subscription",
    "onDelete": "Subscription",
}

# Operations whose field name uses the plural type name.
_PLURAL_OPERATIONS: frozenset[str] = frozenset({"list", "sync", "search"})


def pluralize(name: str) -> str:
    """Return a simple English plural of a type name.

    Example::

        pluralize("Post")  # "Posts"
        pluralize("Category")  # "Categories"
        pluralize("Address")  # "Addresses"
    """
    lower = name.lower()
    if lower.endswith("y") and len(name) > 1 and lower[-2] not in "aeiou":
        return name[:-1] + "ies"
    if lower.endswith(("s", "x", "z", "ch", "sh")):
        return name + "es"
    return name + "s"


def operation_key(operation: str, type_name: str, plural_name: str | None = None) -> str:
    """Return the API operation key a concrete operation is served under.

    Example::

        operation_key("get", "Post")  # "Query.getPost"
        operation_key("list", "Post")  # "Query.listPosts"
        operation_key("onCreate", "Post")  # "Subscription.onCreatePost"
    """
    root = _ROOT_TYPES[operation]
    if operation in _PLURAL_OPERATIONS:
        target = plural_name if plural_name is not None else pluralize(type_name)
    else:
        target = type_name
    return f"{root}.{operation}{target}"
