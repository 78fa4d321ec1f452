"""Artifact data models — declarative runtime authorization checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["Artifact", "RoleClause"]


@dataclass(frozen=True, slots=True)
class RoleClause:
    """One disjunct of an artifact's authorization predicate.

    Attributes:
        role: The role this clause matches.
        allowed: Whether a requester resolved to ``role`` is authorized.
        field: ``None`` for a type-level clause, otherwise the single
            field this clause is scoped to.
    """

    role: str
    allowed: bool
    field: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return {"role": self.role, "allowed": self.allowed, "field": self.field}


@dataclass(frozen=True, slots=True)
class Artifact:
    """Declarative description of the guard for one concrete operation.

    The emitted guard authorizes a request if any clause with
    ``allowed=True`` matches the requester's resolved role.

    Attributes:
        type_name: The compiled type.
        operation: The concrete operation (e.g. ``"list"``, ``"onCreate"``).
        operation_key: The API operation it guards (e.g. ``"Query.listPosts"``).
        clauses: Ordered role clauses.
    """

    type_name: str
    operation: str
    operation_key: str
    clauses: tuple[RoleClause, ...]

    @property
    def resolver_name(self) -> str:
        """Name of the emitted guard, e.g. ``Query.getPost.auth.1.req``."""
        return f"{self.operation_key}.auth.1.req"

    @property
    def roles(self) -> tuple[str, ...]:
        """Roles mentioned by any clause, in clause order."""
        return tuple(dict.fromkeys(c.role for c in self.clauses))

    @property
    def authorized_roles(self) -> tuple[str, ...]:
        """Roles with at least one allowed clause."""
        return tuple(dict.fromkeys(c.role for c in self.clauses if c.allowed))

    @property
    def field_level(self) -> bool:
        """True if any clause is scoped to a single field."""
        return any(c.field is not None for c in self.clauses)

    def authorizes(self, role: str) -> bool:
        """Return whether a requester resolved to *role* passes this guard."""
        return any(c.allowed for c in self.clauses if c.role == role)

    def allowed_fields(self, role: str, fields: tuple[str, ...]) -> tuple[str, ...]:
        """Fields of *fields* that *role* may see or write through this operation.

        Type-level allowed clauses cover every field.
        """
        allowed: set[str] = set()
        for clause in self.clauses:
            if clause.role != role or not clause.allowed:
                continue
            if clause.field is None:
                return fields
            allowed.add(clause.field)
        return tuple(f for f in fields if f in allowed)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return {
            "type_name": self.type_name,
            "operation": self.operation,
            "operation_key": self.operation_key,
            "resolver_name": self.resolver_name,
            "field_level": self.field_level,
            "clauses": [c.to_dict() for c in self.clauses],
        }

    def __str__(self) -> str:
        lines = [f"{self.resolver_name}"]
        if not self.clauses:
            lines.append("  DENY ALL (no roles)")
        for clause in self.clauses:
            verdict = "ALLOW" if clause.allowed else "DENY"
            scope = f" [{clause.field}]" if clause.field is not None else ""
            lines.append(f"  {verdict} {clause.role}{scope}")
        return "\n".join(lines)
