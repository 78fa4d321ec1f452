"""Layered configuration for gql-authz."""

from __future__ import annotations

from dataclasses import dataclass

from gql_authz._types import EXTENDED_READ_OPERATIONS

__all__ = [
    "CompilerConfig",
    "configure",
    "get_global_config",
    "_reset_global_config",
    "_set_global_config",
]

_VALID_EXTENDED_READ: set[str] = set(EXTENDED_READ_OPERATIONS)


@dataclass(frozen=True, slots=True)
class CompilerConfig:
    """Compiler settings with merge semantics (global -> call).

    Attributes:
        extended_read_operations: Extra read operations the host schema
            exposes (``"sync"``, ``"search"``). ``read`` expands to these
            as well, and each gets its own artifact.
        subscriptions: Whether subscription artifacts are generated for
            types that do not say otherwise.
        field_level_clauses: Emit per-field clauses when a role's
            permissions diverge across fields. When ``False`` a diverging
            role gets a single type-level clause that is only allowed if
            every field is allowed. This is stricter than the usual
            type-level check, which passes when any touched field is
            allowed: a role that may update only some fields is denied
            the whole operation in this mode.
        log_compilation: Emit audit log records via the ``gql_authz`` logger.

    Example::

        config = CompilerConfig(extended_read_operations=("sync",))
        merged = config.merge(log_compilation=True)
    """

    extended_read_operations: tuple[str, ...] = ()
    subscriptions: bool = True
    field_level_clauses: bool = True
    log_compilation: bool = False

    def __post_init__(self) -> None:
        extended = tuple(self.extended_read_operations)
        unknown = [op for op in extended if op not in _VALID_EXTENDED_READ]
        if unknown:
            raise ValueError(
                f"extended_read_operations must be a subset of {sorted(_VALID_EXTENDED_READ)!r}, "
                f"got {unknown!r}"
            )
        # Normalise to canonical order without duplicates
        object.__setattr__(
            self,
            "extended_read_operations",
            tuple(op for op in EXTENDED_READ_OPERATIONS if op in extended),
        )

    def merge(
        self,
        *,
        extended_read_operations: tuple[str, ...] | None = None,
        subscriptions: bool | None = None,
        field_level_clauses: bool | None = None,
        log_compilation: bool | None = None,
    ) -> CompilerConfig:
        """Return a new config with non-None overrides applied.

        Args:
            extended_read_operations: Override (ignored if None).
            subscriptions: Override (ignored if None).
            field_level_clauses: Override (ignored if None).
            log_compilation: Override (ignored if None).

        Returns:
            A new ``CompilerConfig`` with overrides merged.
        """
        return CompilerConfig(
            extended_read_operations=(
                extended_read_operations
                if extended_read_operations is not None
                else self.extended_read_operations
            ),
            subscriptions=(subscriptions if subscriptions is not None else self.subscriptions),
            field_level_clauses=(
                field_level_clauses if field_level_clauses is not None else self.field_level_clauses
            ),
            log_compilation=(
                log_compilation if log_compilation is not None else self.log_compilation
            ),
        )


# ---------------------------------------------------------------------------
# Global configuration singleton
# ---------------------------------------------------------------------------

_global_config = CompilerConfig()


def get_global_config() -> CompilerConfig:
    """Return the current global configuration."""
    return _global_config


def configure(
    *,
    extended_read_operations: tuple[str, ...] | None = None,
    subscriptions: bool | None = None,
    field_level_clauses: bool | None = None,
    log_compilation: bool | None = None,
) -> CompilerConfig:
    """Update the global configuration by merging overrides.

    Only non-None values are applied. Returns the new global config.

    Example::

        configure(extended_read_operations=("sync", "search"))
        # "read" now also grants sync and search
    """
    global _global_config
    _global_config = _global_config.merge(
        extended_read_operations=extended_read_operations,
        subscriptions=subscriptions,
        field_level_clauses=field_level_clauses,
        log_compilation=log_compilation,
    )
    return _global_config


def _set_global_config(cfg: CompilerConfig) -> None:
    """Replace global config with an exact snapshot. For testing only."""
    global _global_config
    _global_config = cfg


def _reset_global_config() -> None:
    """Reset global config to defaults. For testing only."""
    global _global_config
    _global_config = CompilerConfig()
