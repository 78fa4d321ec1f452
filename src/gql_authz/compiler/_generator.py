"""Artifact generation — turn a permission matrix into per-operation guards."""

from __future__ import annotations

from gql_authz._types import SUBSCRIPTION_SOURCES
from gql_authz.compiler._artifacts import Artifact, RoleClause
from gql_authz.compiler._naming import operation_key
from gql_authz.config._config import CompilerConfig, get_global_config
from gql_authz.matrix._matrix import PermissionMatrix
from gql_authz.rules._base import TypeDescriptor

__all__ = ["build_clauses", "effective_allowed", "generate"]


def effective_allowed(matrix: PermissionMatrix, role: str, field: str, operation: str) -> bool:
    """Return whether *role* may perform *operation* on *field*, with inheritance.

    Subscriptions are never granted directly: ``onCreate`` is visible to
    roles that may ``create`` or ``list``, and likewise for ``onUpdate``
    and ``onDelete``. A ``get``-only role never observes events.
    """
    sources = SUBSCRIPTION_SOURCES.get(operation)
    if sources is None:
        return matrix.is_allowed(role, field, operation)
    return any(matrix.is_allowed(role, field, source) for source in sources)


def build_clauses(
    matrix: PermissionMatrix,
    operation: str,
    *,
    field_level: bool = True,
) -> tuple[RoleClause, ...]:
    """Build the ordered role clauses for one concrete operation.

    A role whose permission is identical on every field gets a single
    type-level clause. A diverging role gets one clause per field, or
    with ``field_level=False`` a single clause that is only allowed when
    every field is allowed.
    """
    clauses: list[RoleClause] = []
    for role in matrix.roles:
        permissions = [
            (field, effective_allowed(matrix, role, field, operation)) for field in matrix.resources
        ]
        values = {allowed for _, allowed in permissions}
        if len(values) == 1:
            clauses.append(RoleClause(role=role, allowed=values.pop()))
        elif field_level:
            clauses.extend(
                RoleClause(role=role, allowed=allowed, field=field)
                for field, allowed in permissions
            )
        else:
            clauses.append(RoleClause(role=role, allowed=False))
    return tuple(clauses)


def generate(
    matrix: PermissionMatrix,
    descriptor: TypeDescriptor,
    *,
    config: CompilerConfig | None = None,
) -> list[Artifact]:
    """Generate one artifact per concrete operation of *descriptor*.

    Artifacts are ordered queries first, then mutations, then
    subscriptions. Subscription artifacts are skipped when the type (or,
    if it does not say, the config) disables subscriptions. An operation
    no role may perform still yields an artifact: a deny-all guard.

    Args:
        matrix: The populated matrix for *descriptor*.
        descriptor: The compiled type.
        config: Optional config. Defaults to the global config.

    Returns:
        A list of ``Artifact`` objects.

    Example::

        matrix = normalize_type(descriptor)
        for artifact in generate(matrix, descriptor):
            print(artifact.operation_key, artifact.authorized_roles)
    """
    cfg = config if config is not None else get_global_config()
    subscriptions = (
        descriptor.subscriptions if descriptor.subscriptions is not None else cfg.subscriptions
    )

    artifacts: list[Artifact] = []
    for operation in matrix.operations:
        if operation in SUBSCRIPTION_SOURCES and not subscriptions:
            continue
        artifacts.append(
            Artifact(
                type_name=descriptor.name,
                operation=operation,
                operation_key=operation_key(operation, descriptor.name, descriptor.plural_name),
                clauses=build_clauses(matrix, operation, field_level=cfg.field_level_clauses),
            )
        )
    return artifacts
