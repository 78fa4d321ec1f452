"""Permission matrix — deny-by-default role x field x operation storage."""

from gql_authz.matrix._matrix import PermissionMatrix

__all__ = ["PermissionMatrix"]
