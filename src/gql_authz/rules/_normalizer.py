"""Rule normalization — validate declarative rules and expand them into a matrix."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from gql_authz._types import (
    EXTENDED_READ_OPERATIONS,
    READ_CONFLICTS,
    concrete_operations,
    expand_operation,
)
from gql_authz.config._config import CompilerConfig, get_global_config
from gql_authz.exceptions import InvalidFieldReference, RuleConflictError
from gql_authz.matrix._matrix import PermissionMatrix
from gql_authz.rules._base import Rule, TypeDescriptor

__all__ = ["check_rule", "effective_operations", "normalize", "normalize_type"]


def check_rule(rule: Rule, *, type_name: str, fields: Sequence[str]) -> None:
    """Validate a single rule against its type.

    The ``read``/``get`` and ``read``/``list`` checks only look inside
    this rule: a separate rule granting ``get`` to the same role is fine.

    Raises:
        RuleConflictError: If the rule lists ``read`` together with
            ``get`` or ``list``.
        InvalidFieldReference: If the rule names a field that is not
            declared on the type.
    """
    if "read" in rule.operations:
        for operation in READ_CONFLICTS:
            if operation in rule.operations:
                raise RuleConflictError(type_name=type_name, role=rule.role, operation=operation)
    if rule.fields is not None:
        known = set(fields)
        for field in rule.fields:
            if field not in known:
                raise InvalidFieldReference(type_name=type_name, field=field)


def effective_operations(rule: Rule, config: CompilerConfig | None = None) -> tuple[str, ...]:
    """Return the concrete operations a rule grants, in first-seen order.

    Raises:
        ValueError: If the rule names an extended read operation that is
            not enabled in *config*.
    """
    cfg = config if config is not None else get_global_config()
    extended = cfg.extended_read_operations
    result: dict[str, None] = {}
    for operation in rule.operations:
        if operation in EXTENDED_READ_OPERATIONS and operation not in extended:
            raise ValueError(
                f"Operation {operation!r} in rule for role {rule.role!r} is not enabled; "
                f"add it to extended_read_operations"
            )
        result.update(dict.fromkeys(expand_operation(operation, extended)))
    return tuple(result)


def normalize(
    rules: Iterable[Rule],
    fields: Sequence[str],
    *,
    type_name: str,
    config: CompilerConfig | None = None,
) -> PermissionMatrix:
    """Expand *rules* into a fresh permission matrix for one type.

    Rules are processed in order and only ever add grants. Any invalid
    rule aborts normalization immediately; a partially populated matrix
    is never returned.

    Args:
        rules: Declared rules, in authored order.
        fields: The type's full field set.
        type_name: Name of the type (used for the matrix and in errors).
        config: Optional config. Defaults to the global config.

    Returns:
        The populated ``PermissionMatrix``.

    Raises:
        RuleConflictError: A rule mixes ``read`` with ``get``/``list``.
        InvalidFieldReference: A rule names an undeclared field.

    Example::

        matrix = normalize(
            [Rule("apiKey:public", ["list", "create"])],
            ["id", "name"],
            type_name="Test",
        )
        matrix.is_allowed("apiKey:public", "id", "list")  # True
        matrix.is_allowed("apiKey:public", "id", "get")  # False
    """
    cfg = config if config is not None else get_global_config()
    matrix = PermissionMatrix(type_name, fields, concrete_operations(cfg.extended_read_operations))

    for rule in rules:
        check_rule(rule, type_name=type_name, fields=matrix.resources)
        operations = effective_operations(rule, cfg)
        if cfg.log_compilation:
            from gql_authz._audit import log_rule_expansion

            log_rule_expansion(type_name=type_name, rule=rule, effective_operations=operations)
        matrix.grant(rule.role, operations, rule.fields)

    return matrix


def normalize_type(
    descriptor: TypeDescriptor,
    *,
    config: CompilerConfig | None = None,
) -> PermissionMatrix:
    """Normalize the rules declared on *descriptor*."""
    return normalize(
        descriptor.rules,
        descriptor.fields,
        type_name=descriptor.name,
        config=config,
    )
