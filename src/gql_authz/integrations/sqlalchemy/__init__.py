"""SQLAlchemy integration for gql-authz — describe mapped models as compiler types."""

from __future__ import annotations

try:
    import sqlalchemy as _sqlalchemy_check  # noqa: F401  # pyright: ignore[reportUnusedImport]

    del _sqlalchemy_check
except ImportError as exc:
    raise ImportError(
        "SQLAlchemy integration requires sqlalchemy. "
        "Install it with: pip install gql-authz[sqlalchemy]"
    ) from exc

from gql_authz.integrations.sqlalchemy._model import compile_models, describe_model

__all__ = ["compile_models", "describe_model"]
