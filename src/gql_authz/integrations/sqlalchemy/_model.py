"""describe_model() — build a TypeDescriptor from a SQLAlchemy mapped class."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import Mapper

from gql_authz.compiler._schema import CompiledSchema, compile_schema
from gql_authz.config._config import CompilerConfig
from gql_authz.rules._base import Rule, TypeDescriptor

__all__ = ["compile_models", "describe_model"]


def describe_model(
    model: type,
    rules: Iterable[Rule],
    *,
    name: str | None = None,
    plural_name: str | None = None,
    subscriptions: bool | None = None,
) -> TypeDescriptor:
    """Describe a SQLAlchemy declarative model as a compiler type.

    The model's mapped column attributes become the type's fields, in
    mapper order. Relationships are not fields.

    Args:
        model: A mapped SQLAlchemy class.
        rules: Declared rules for the type.
        name: Type name. Defaults to the class name.
        plural_name: Optional plural for list operation keys.
        subscriptions: Optional per-type subscription switch.

    Returns:
        A ``TypeDescriptor``.

    Raises:
        ValueError: If *model* is not a mapped class.

    Example::

        descriptor = describe_model(Post, [Rule("apiKey:public", ["read"])])
        descriptor.fields  # ("id", "title", "is_published", "author_id")
    """
    mapper = sa_inspect(model, raiseerr=False)
    if not isinstance(mapper, Mapper):
        raise ValueError(f"{model!r} is not a mapped SQLAlchemy class")

    return TypeDescriptor(
        name=name if name is not None else model.__name__,
        fields=tuple(prop.key for prop in mapper.column_attrs),
        rules=tuple(rules),
        plural_name=plural_name,
        subscriptions=subscriptions,
    )


def compile_models(
    rules: Mapping[type, Iterable[Rule]],
    *,
    config: CompilerConfig | None = None,
    max_workers: int | None = None,
) -> CompiledSchema:
    """Describe and compile several mapped models at once.

    Example::

        schema = compile_models({
            Post: [Rule("apiKey:public", ["read"])],
            User: [Rule("userPools:owner:id", ["read", "update"])],
        })
    """
    descriptors = [describe_model(model, model_rules) for model, model_rules in rules.items()]
    return compile_schema(descriptors, config=config, max_workers=max_workers)
