"""explain_access() — explain why a role can/can't perform an operation on a field."""

from __future__ import annotations

from gql_authz._types import SUBSCRIPTION_SOURCES
from gql_authz.compiler._generator import effective_allowed
from gql_authz.config._config import CompilerConfig, get_global_config
from gql_authz.explain._models import AccessExplanation, RuleEvaluation
from gql_authz.rules._base import TypeDescriptor
from gql_authz.rules._normalizer import effective_operations, normalize_type

__all__ = ["explain_access"]


def explain_access(
    descriptor: TypeDescriptor,
    role: str,
    field: str,
    operation: str,
    *,
    config: CompilerConfig | None = None,
) -> AccessExplanation:
    """Explain whether *role* may perform *operation* on ``descriptor.field``.

    The descriptor is normalized first, so invalid rules raise exactly
    as they would during compilation. Each declared rule is then checked
    individually to report which ones grant the access.

    Args:
        descriptor: The type whose rules are explained.
        role: The role to check.
        field: The field to check.
        operation: A concrete operation (subscriptions included).
        config: Optional config. Defaults to the global config.

    Returns:
        An ``AccessExplanation`` with per-rule results and the verdict.

    Example::

        explanation = explain_access(descriptor, "apiKey:public", "id", "onCreate")
        print(explanation)
    """
    cfg = config if config is not None else get_global_config()
    matrix = normalize_type(descriptor, config=cfg)
    sources = SUBSCRIPTION_SOURCES.get(operation, (operation,))

    evaluations: list[RuleEvaluation] = []
    for index, rule in enumerate(descriptor.rules):
        granted = effective_operations(rule, cfg)
        targets_field = rule.fields is None or field in rule.fields
        matched = (
            rule.role == role
            and targets_field
            and field in matrix.resources
            and any(op in granted for op in sources)
        )
        evaluations.append(
            RuleEvaluation(
                index=index,
                role=rule.role,
                operations=rule.operations,
                effective_operations=granted,
                fields=rule.fields,
                matched=matched,
            )
        )

    allowed = effective_allowed(matrix, role, field, operation)
    return AccessExplanation(
        type_name=descriptor.name,
        role=role,
        field=field,
        operation=operation,
        allowed=allowed,
        deny_by_default=not any(e.matched for e in evaluations),
        derived_from=sources,
        rules=evaluations,
    )
