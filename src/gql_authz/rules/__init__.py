"""Rule model and normalization — declarative rules into permission matrices."""

from gql_authz.rules._base import Rule, TypeDescriptor
from gql_authz.rules._normalizer import check_rule, effective_operations, normalize, normalize_type

__all__ = [
    "Rule",
    "TypeDescriptor",
    "check_rule",
    "effective_operations",
    "normalize",
    "normalize_type",
]
