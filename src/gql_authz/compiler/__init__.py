"""Compiler — turns permission matrices into per-operation authorization artifacts."""

from gql_authz.compiler._artifacts import Artifact, RoleClause
from gql_authz.compiler._generator import build_clauses, effective_allowed, generate
from gql_authz.compiler._naming import operation_key, pluralize
from gql_authz.compiler._schema import CompiledSchema, CompiledType, compile_schema, compile_type

__all__ = [
    "Artifact",
    "CompiledSchema",
    "CompiledType",
    "RoleClause",
    "build_clauses",
    "compile_schema",
    "compile_type",
    "effective_allowed",
    "generate",
    "operation_key",
    "pluralize",
]
