"""Rule and TypeDescriptor dataclasses — the compiler's input model."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from gql_authz._types import DECLARATIVE_OPERATIONS

__all__ = ["Rule", "TypeDescriptor"]


@dataclass(frozen=True, slots=True)
class Rule:
    """A single declarative access rule.

    Attributes:
        role: The opaque role identifier the rule grants to.
        operations: Declarative operations, in authored order.
        fields: Fields the rule targets, or ``None`` for every field.

    Example::

        Rule("apiKey:public", ["read", "create"])
        Rule("userPools:owner:owner", ["update"], fields=["title"])
    """

    role: str
    operations: tuple[str, ...]
    fields: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        if not self.role:
            raise ValueError("Rule role must be a non-empty string")
        if isinstance(self.operations, str):
            raise ValueError(f"Rule operations must be a sequence, got string {self.operations!r}")
        operations = tuple(dict.fromkeys(self.operations))
        if not operations:
            raise ValueError(f"Rule for role {self.role!r} must list at least one operation")
        unknown = [op for op in operations if op not in DECLARATIVE_OPERATIONS]
        if unknown:
            raise ValueError(
                f"Unknown operation(s) {unknown!r} in rule for role {self.role!r}; "
                f"expected any of {sorted(DECLARATIVE_OPERATIONS)!r}"
            )
        object.__setattr__(self, "operations", operations)
        if self.fields is not None:
            if isinstance(self.fields, str):
                raise ValueError(f"Rule fields must be a sequence, got string {self.fields!r}")
            fields = tuple(dict.fromkeys(self.fields))
            if not fields:
                raise ValueError(
                    f"Rule for role {self.role!r} lists an empty field set; "
                    "omit it to target all fields"
                )
            object.__setattr__(self, "fields", fields)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Rule:
        """Build a rule from a plain mapping.

        Accepts ``{"role": ..., "operations": [...], "fields": [...]}``;
        ``fields`` is optional.
        """
        return cls(
            role=data["role"],
            operations=data["operations"],
            fields=data.get("fields"),
        )


@dataclass(frozen=True, slots=True)
class TypeDescriptor:
    """A type under compilation, as handed over by the schema parser.

    Attributes:
        name: The type name (e.g. ``"Post"``).
        fields: Ordered field names. Must be non-empty and unique.
        rules: Declared rules, in authored order.
        plural_name: Optional plural used in list/sync/search operation
            keys. Derived from ``name`` when omitted.
        subscriptions: ``False`` when the host schema disables
            subscriptions for this type; ``None`` defers to configuration.
    """

    name: str
    fields: tuple[str, ...]
    rules: tuple[Rule, ...] = ()
    plural_name: str | None = None
    subscriptions: bool | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("TypeDescriptor name must be a non-empty string")
        if isinstance(self.fields, str):
            raise ValueError(
                f"Type {self.name!r} fields must be a sequence, got string {self.fields!r}"
            )
        fields = tuple(self.fields)
        if not fields:
            raise ValueError(f"Type {self.name!r} must declare at least one field")
        duplicates = sorted({f for f in fields if fields.count(f) > 1})
        if duplicates:
            raise ValueError(f"Type {self.name!r} declares duplicate field(s) {duplicates!r}")
        object.__setattr__(self, "fields", fields)
        object.__setattr__(self, "rules", tuple(self.rules))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TypeDescriptor:
        """Build a descriptor from a plain mapping.

        Example::

            TypeDescriptor.from_dict({
                "name": "Test",
                "fields": ["id", "name"],
                "rules": [{"role": "apiKey:public", "operations": ["list", "create"]}],
            })
        """
        return cls(
            name=data["name"],
            fields=data["fields"],
            rules=tuple(
                rule if isinstance(rule, Rule) else Rule.from_dict(rule)
                for rule in data.get("rules", ())
            ),
            plural_name=data.get("plural_name"),
            subscriptions=data.get("subscriptions"),
        )

    def with_rules(self, rules: Iterable[Rule]) -> TypeDescriptor:
        """Return a copy of this descriptor with *rules* replacing its rules."""
        return TypeDescriptor(
            name=self.name,
            fields=self.fields,
            rules=tuple(rules),
            plural_name=self.plural_name,
            subscriptions=self.subscriptions,
        )
