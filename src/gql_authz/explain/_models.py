"""Data models for explain output."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["AccessExplanation", "RuleEvaluation"]


@dataclass(frozen=True, slots=True)
class RuleEvaluation:
    """Result of evaluating a single declared rule for an access question.

    Attributes:
        index: Position of the rule in the type's rule list.
        role: The role the rule grants to.
        operations: The rule's authored operations.
        effective_operations: The concrete operations the rule grants.
        fields: The fields the rule targets, or ``None`` for all fields.
        matched: Whether this rule grants the requested access.
    """

    index: int
    role: str
    operations: tuple[str, ...]
    effective_operations: tuple[str, ...]
    fields: tuple[str, ...] | None
    matched: bool

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return {
            "index": self.index,
            "role": self.role,
            "operations": list(self.operations),
            "effective_operations": list(self.effective_operations),
            "fields": list(self.fields) if self.fields is not None else None,
            "matched": self.matched,
        }


@dataclass(frozen=True, slots=True)
class AccessExplanation:
    """Explanation of why a role can or cannot perform an operation on a field.

    Attributes:
        type_name: The type the field belongs to.
        role: The role being checked.
        field: The field being checked.
        operation: The concrete operation being checked.
        allowed: Whether access is allowed overall.
        deny_by_default: True if no rule grants the access.
        derived_from: Source operations when *operation* is a subscription,
            otherwise ``(operation,)``.
        rules: Per-rule evaluation results, in declaration order.
    """

    type_name: str
    role: str
    field: str
    operation: str
    allowed: bool
    deny_by_default: bool
    derived_from: tuple[str, ...]
    rules: list[RuleEvaluation]

    @property
    def matched_rules(self) -> list[RuleEvaluation]:
        """Rules that grant the access."""
        return [r for r in self.rules if r.matched]

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return {
            "type_name": self.type_name,
            "role": self.role,
            "field": self.field,
            "operation": self.operation,
            "allowed": self.allowed,
            "deny_by_default": self.deny_by_default,
            "derived_from": list(self.derived_from),
            "rules": [r.to_dict() for r in self.rules],
        }

    def __str__(self) -> str:
        """Return a human-readable multi-line explanation."""
        verdict = "ALLOWED" if self.allowed else "DENIED"
        lines: list[str] = []
        lines.append(f"Access Check: {verdict}")
        lines.append(f"  Role: {self.role}")
        lines.append(f"  Operation: {self.operation}")
        lines.append(f"  Field: {self.type_name}.{self.field}")
        if self.derived_from != (self.operation,):
            lines.append(f"  Derived from: {', '.join(self.derived_from)}")
        lines.append("")
        if self.deny_by_default:
            lines.append("  DENY BY DEFAULT (no rule grants this access)")
        else:
            lines.append("  Rule Results:")
            for r in self.rules:
                if r.role != self.role:
                    continue
                status = "MATCH" if r.matched else "NO MATCH"
                scope = ", ".join(r.fields) if r.fields is not None else "all fields"
                lines.append(f"    - rule #{r.index} [{status}]: {list(r.operations)} on {scope}")
        return "\n".join(lines)
