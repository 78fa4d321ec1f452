"""Exception hierarchy for gql-authz."""

from __future__ import annotations

__all__ = [
    "AuthzError",
    "InvalidFieldReference",
    "RuleConflictError",
]


class AuthzError(Exception):
    """Base exception for all gql-authz errors."""


class RuleConflictError(AuthzError):
    """A single rule mixes the ``read`` aggregate with ``get`` or ``list``.

    The intent of such a rule is ambiguous, so compilation of the whole
    schema is aborted instead of guessing.

    Attributes:
        type_name: The type whose rule is in conflict.
        role: The role the offending rule grants to.
        operation: The granular operation listed alongside ``read``.
        aggregate: The aggregate operation (always ``"read"``).

    Example::

        try:
            normalize_type(descriptor)
        except RuleConflictError as exc:
            print(f"{exc.type_name}: {exc.operation} conflicts with {exc.aggregate}")
    """

    def __init__(
        self,
        *,
        type_name: str,
        role: str,
        operation: str,
        aggregate: str = "read",
        message: str | None = None,
    ) -> None:
        self.type_name = type_name
        self.role = role
        self.operation = operation
        self.aggregate = aggregate
        if message is None:
            message = (
                f"'{operation}' operation is specified in addition to '{aggregate}'. "
                f"Either remove '{aggregate}' to limit access only to '{operation}' "
                f"or only keep '{aggregate}' to grant both 'get' and 'list' access."
            )
        super().__init__(message)


class InvalidFieldReference(AuthzError):  # noqa: N818
    """A rule names a field that does not exist on its type.

    Attributes:
        type_name: The type the rule is attached to.
        field: The unknown field name.
    """

    def __init__(self, *, type_name: str, field: str) -> None:
        self.type_name = type_name
        self.field = field
        super().__init__(
            f"Field {field!r} referenced in an auth rule does not exist on {type_name}"
        )
