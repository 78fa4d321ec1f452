"""gql-authz — field-level authorization rule compiler for GraphQL-style APIs.

Compiles declarative ``{role, operations}`` rules attached to a type into
a deny-by-default permission matrix and one authorization artifact per
concrete API operation, ready for a code-emission layer.

Example::

    from gql_authz import Rule, TypeDescriptor, compile_type

    compiled = compile_type(TypeDescriptor(
        name="Post",
        fields=("id", "title"),
        rules=(Rule("apiKey:public", ["read", "create"]),),
    ))
    compiled.matrix.is_allowed("apiKey:public", "title", "list")  # True
    compiled.artifact("onCreate").authorizes("apiKey:public")  # True
"""

from importlib.metadata import PackageNotFoundError, version

from gql_authz.compiler._artifacts import Artifact, RoleClause
from gql_authz.compiler._generator import generate
from gql_authz.compiler._schema import CompiledSchema, CompiledType, compile_schema, compile_type
from gql_authz.config._config import CompilerConfig, configure
from gql_authz.exceptions import AuthzError, InvalidFieldReference, RuleConflictError
from gql_authz.explain._access import explain_access
from gql_authz.matrix._matrix import PermissionMatrix
from gql_authz.rules._base import Rule, TypeDescriptor
from gql_authz.rules._normalizer import normalize, normalize_type

try:
    __version__ = version("gql-authz")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "__version__",
    "Artifact",
    "AuthzError",
    "CompiledSchema",
    "CompiledType",
    "CompilerConfig",
    "InvalidFieldReference",
    "PermissionMatrix",
    "RoleClause",
    "Rule",
    "RuleConflictError",
    "TypeDescriptor",
    "compile_schema",
    "compile_type",
    "configure",
    "explain_access",
    "generate",
    "normalize",
    "normalize_type",
]
