"""PermissionMatrix — deny-by-default role x field x operation table."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from gql_authz._types import BASE_CONCRETE_OPERATIONS, concrete_operations

__all__ = ["PermissionMatrix"]

_KNOWN_OPERATIONS: frozenset[str] = frozenset(concrete_operations(("sync", "search")))


class PermissionMatrix:
    """Authoritative permission table for a single compiled type.

    Every ``(role, field, operation)`` entry starts denied. Grants are a
    monotonic union: nothing ever clears an entry once it is allowed.
    The matrix holds no business logic; rule expansion lives in the
    normalizer and subscription inheritance in the artifact generator.

    Example::

        matrix = PermissionMatrix("Post", ["id", "title"], concrete_operations())
        matrix.grant("apiKey:public", ["get", "list"])
        matrix.is_allowed("apiKey:public", "title", "list")  # True
        matrix.is_allowed("apiKey:public", "title", "create")  # False
    """

    def __init__(
        self,
        name: str,
        resources: Iterable[str],
        operations: Iterable[str],
    ) -> None:
        resource_list = tuple(dict.fromkeys(resources))
        operation_list = tuple(dict.fromkeys(operations))
        if not resource_list:
            raise ValueError(f"PermissionMatrix {name!r} requires at least one resource")
        unknown = [op for op in operation_list if op not in _KNOWN_OPERATIONS]
        if unknown:
            raise ValueError(f"Unknown concrete operation(s) for {name!r}: {unknown!r}")
        missing = [op for op in BASE_CONCRETE_OPERATIONS if op not in operation_list]
        if missing:
            raise ValueError(
                f"PermissionMatrix {name!r} must cover every concrete operation, "
                f"missing {missing!r}"
            )
        self._name = name
        self._resources = resource_list
        self._operations = operation_list
        # role -> field -> allowed operations; dict order is first-grant order
        self._grants: dict[str, dict[str, set[str]]] = {}

    @property
    def name(self) -> str:
        return self._name

    @property
    def resources(self) -> tuple[str, ...]:
        return self._resources

    @property
    def operations(self) -> tuple[str, ...]:
        return self._operations

    @property
    def roles(self) -> tuple[str, ...]:
        """Roles holding at least one grant, in first-grant order."""
        return tuple(self._grants)

    def grant(
        self,
        role: str,
        operations: Iterable[str],
        fields: Iterable[str] | None = None,
    ) -> None:
        """Allow *role* every operation in *operations* on *fields*.

        Idempotent and additive. ``fields=None`` targets every resource.

        Args:
            role: The role receiving the grant.
            operations: Concrete operations to allow.
            fields: Fields to allow them on. Defaults to all resources.

        Raises:
            ValueError: If a field or operation is outside this matrix.
        """
        ops = tuple(operations)
        targets = self._resources if fields is None else tuple(fields)
        bad_ops = [op for op in ops if op not in self._operations]
        if bad_ops:
            raise ValueError(f"Operation(s) {bad_ops!r} are not part of matrix {self._name!r}")
        bad_fields = [f for f in targets if f not in self._resources]
        if bad_fields:
            raise ValueError(f"Field(s) {bad_fields!r} are not part of matrix {self._name!r}")
        if not ops or not targets:
            return
        per_field = self._grants.setdefault(role, {})
        for field in targets:
            per_field.setdefault(field, set()).update(ops)

    def is_allowed(self, role: str, field: str, operation: str) -> bool:
        """Return whether *role* may perform *operation* on *field*.

        Unknown roles, fields and operations are simply denied.
        """
        per_field = self._grants.get(role)
        if per_field is None:
            return False
        return operation in per_field.get(field, ())

    def allowed_fields(self, role: str, operation: str) -> tuple[str, ...]:
        """Fields on which *role* may perform *operation*, in resource order."""
        return tuple(f for f in self._resources if self.is_allowed(role, f, operation))

    def allowed_operations(self, role: str, field: str) -> tuple[str, ...]:
        """Operations *role* may perform on *field*, in operation order."""
        return tuple(op for op in self._operations if self.is_allowed(role, field, op))

    def roles_with_any_access(self, field: str) -> tuple[str, ...]:
        """Roles allowed at least one operation on *field*."""
        return tuple(role for role, per_field in self._grants.items() if per_field.get(field))

    def fields_with_any_access(self, role: str) -> tuple[str, ...]:
        """Fields on which *role* is allowed at least one operation."""
        per_field = self._grants.get(role, {})
        return tuple(f for f in self._resources if per_field.get(f))

    def is_uniform(
        self,
        role: str,
        operation: str,
        fields: Iterable[str] | None = None,
    ) -> bool:
        """Return whether *role* has the same permission for *operation* on all *fields*.

        A uniform role can be checked once at type level; a diverging one
        needs field-scoped checks.
        """
        targets = self._resources if fields is None else tuple(fields)
        return len({self.is_allowed(role, f, operation) for f in targets}) <= 1

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable snapshot of all grants."""
        return {
            "name": self._name,
            "resources": list(self._resources),
            "operations": list(self._operations),
            "grants": {
                role: {
                    f: list(self.allowed_operations(role, f))
                    for f in self.fields_with_any_access(role)
                }
                for role in self._grants
            },
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PermissionMatrix):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"PermissionMatrix(name={self._name!r}, resources={len(self._resources)}, "
            f"roles={list(self._grants)!r})"
        )
