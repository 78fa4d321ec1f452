"""Audit logging for compilation decisions."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gql_authz.compiler._artifacts import Artifact
    from gql_authz.matrix._matrix import PermissionMatrix
    from gql_authz.rules._base import Rule

__all__ = ["log_compile_error", "log_rule_expansion", "log_type_compilation"]

logger = logging.getLogger("gql_authz")


def log_rule_expansion(
    *,
    type_name: str,
    rule: Rule,
    effective_operations: Sequence[str],
) -> None:
    """Log how a single rule was expanded into concrete grants (DEBUG)."""
    if not logger.isEnabledFor(logging.DEBUG):
        return
    logger.debug(
        "Rule expansion for %s: role=%r authored=%s effective=%s fields=%s",
        type_name,
        rule.role,
        list(rule.operations),
        list(effective_operations),
        list(rule.fields) if rule.fields is not None else "<all>",
    )


def log_type_compilation(
    *,
    type_name: str,
    rules: Sequence[Rule],
    matrix: PermissionMatrix,
    artifacts: Sequence[Artifact],
) -> None:
    """Log a compiled type.

    Logging levels:
    - INFO: Summary (type, rule count, role count, artifact count)
    - WARNING: No rules declared (every artifact denies), or an artifact
      that authorizes no role

    Example::

        log_type_compilation(
            type_name="Post",
            rules=descriptor.rules,
            matrix=matrix,
            artifacts=artifacts,
        )
    """
    if not rules:
        logger.warning(
            "No auth rules declared for %s — every operation is deny-by-default",
            type_name,
        )
    else:
        for artifact in artifacts:
            if not artifact.authorized_roles:
                logger.warning(
                    "%s authorizes no role — guard always denies",
                    artifact.operation_key,
                )

    logger.info(
        "Compiled %s: %d rule(s), %d role(s), %d artifact(s)",
        type_name,
        len(rules),
        len(matrix.roles),
        len(artifacts),
    )


def log_compile_error(*, type_name: str, error: Exception) -> None:
    """Log a fatal compile error to the ``gql_authz.errors`` sub-logger."""
    error_logger = logging.getLogger("gql_authz.errors")
    error_logger.error(
        "Compilation of %s failed: %s: %s",
        type_name,
        type(error).__name__,
        error,
    )
