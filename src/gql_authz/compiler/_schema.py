"""compile_type() / compile_schema() — end-to-end compilation entry points."""

from __future__ import annotations

from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any

from gql_authz.compiler._artifacts import Artifact
from gql_authz.compiler._generator import generate
from gql_authz.config._config import CompilerConfig, get_global_config
from gql_authz.matrix._matrix import PermissionMatrix
from gql_authz.rules._base import TypeDescriptor
from gql_authz.rules._normalizer import normalize_type

__all__ = ["CompiledSchema", "CompiledType", "compile_schema", "compile_type"]


@dataclass(frozen=True, slots=True)
class CompiledType:
    """Compilation output for a single type.

    Attributes:
        descriptor: The input type descriptor.
        matrix: The populated permission matrix.
        artifacts: Generated artifacts, in emission order.
    """

    descriptor: TypeDescriptor
    matrix: PermissionMatrix
    artifacts: tuple[Artifact, ...]

    @property
    def name(self) -> str:
        return self.descriptor.name

    def artifact(self, operation: str) -> Artifact:
        """Return the artifact for a concrete operation.

        Raises:
            KeyError: If no artifact exists for *operation* (e.g. a
                subscription on a type with subscriptions disabled).
        """
        for artifact in self.artifacts:
            if artifact.operation == operation:
                return artifact
        raise KeyError(f"No artifact for operation {operation!r} on {self.name}")

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return {
            "name": self.name,
            "matrix": self.matrix.to_dict(),
            "artifacts": [a.to_dict() for a in self.artifacts],
        }


@dataclass(frozen=True, slots=True)
class CompiledSchema:
    """Compilation output for a whole schema, ordered by type name."""

    types: tuple[CompiledType, ...]

    @property
    def artifacts(self) -> tuple[Artifact, ...]:
        """Every artifact of every type, in type-name then emission order."""
        return tuple(a for t in self.types for a in t.artifacts)

    def get_type(self, name: str) -> CompiledType:
        """Return the compiled type called *name*.

        Raises:
            KeyError: If the schema has no such type.
        """
        for compiled in self.types:
            if compiled.name == name:
                return compiled
        raise KeyError(f"No compiled type named {name!r}")

    def by_operation_key(self) -> dict[str, Artifact]:
        """Map each operation key (e.g. ``"Query.listPosts"``) to its artifact."""
        return {a.operation_key: a for a in self.artifacts}

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return {"types": [t.to_dict() for t in self.types]}


def compile_type(
    descriptor: TypeDescriptor,
    *,
    config: CompilerConfig | None = None,
) -> CompiledType:
    """Normalize the rules of one type and generate its artifacts.

    Args:
        descriptor: The type to compile.
        config: Optional config. Defaults to the global config.

    Returns:
        A ``CompiledType`` holding the matrix and artifacts.

    Raises:
        RuleConflictError: A rule mixes ``read`` with ``get``/``list``.
        InvalidFieldReference: A rule names an undeclared field.

    Example::

        compiled = compile_type(TypeDescriptor(
            name="Test",
            fields=("id", "name"),
            rules=(Rule("apiKey:public", ["read", "create"]),),
        ))
        compiled.artifact("list").authorizes("apiKey:public")  # True
    """
    cfg = config if config is not None else get_global_config()
    matrix = normalize_type(descriptor, config=cfg)
    artifacts = generate(matrix, descriptor, config=cfg)

    if cfg.log_compilation:
        from gql_authz._audit import log_type_compilation

        log_type_compilation(
            type_name=descriptor.name,
            rules=descriptor.rules,
            matrix=matrix,
            artifacts=artifacts,
        )

    return CompiledType(descriptor=descriptor, matrix=matrix, artifacts=tuple(artifacts))


def _compile_or_log(descriptor: TypeDescriptor, config: CompilerConfig) -> CompiledType:
    try:
        return compile_type(descriptor, config=config)
    except Exception as exc:
        from gql_authz._audit import log_compile_error

        log_compile_error(type_name=descriptor.name, error=exc)
        raise


def compile_schema(
    types: Iterable[TypeDescriptor],
    *,
    config: CompilerConfig | None = None,
    max_workers: int | None = None,
) -> CompiledSchema:
    """Compile every type of a schema.

    Types share no state, so with ``max_workers`` greater than one they
    are compiled on a thread pool. Results are always ordered by type
    name. The first error aborts the whole run; no partial schema is
    returned.

    Args:
        types: Type descriptors to compile.
        config: Optional config. Defaults to the global config.
        max_workers: Thread pool size. ``None`` or ``1`` compiles
            sequentially.

    Returns:
        A ``CompiledSchema``.

    Raises:
        ValueError: If two descriptors share a type name.
        RuleConflictError: A rule mixes ``read`` with ``get``/``list``.
        InvalidFieldReference: A rule names an undeclared field.
    """
    cfg = config if config is not None else get_global_config()
    descriptors = list(types)

    seen: set[str] = set()
    for descriptor in descriptors:
        if descriptor.name in seen:
            raise ValueError(f"Type {descriptor.name!r} is declared more than once")
        seen.add(descriptor.name)

    if max_workers is None or max_workers <= 1 or len(descriptors) <= 1:
        compiled = [_compile_or_log(d, cfg) for d in descriptors]
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            futures = [pool.submit(_compile_or_log, d, cfg) for d in descriptors]
            try:
                compiled = [f.result() for f in futures]
            except Exception:
                for future in futures:
                    future.cancel()
                raise

    return CompiledSchema(types=tuple(sorted(compiled, key=lambda c: c.name)))
