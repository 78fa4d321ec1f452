"""Explain mode — structured insight into authorization decisions."""

from gql_authz.explain._access import explain_access
from gql_authz.explain._models import AccessExplanation, RuleEvaluation

__all__ = [
    "AccessExplanation",
    "RuleEvaluation",
    "explain_access",
]
