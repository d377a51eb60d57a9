"""Type dispatch: named types become registry refs, anonymous types are inlined.

``include_type`` is the single recursive entry point every builder calls for
a child type. Named types (aliases, interfaces, classes, enums, library and
global types) go through the registry exactly once; structural types are
classified in a fixed order and inlined where they are used.
"""

from __future__ import annotations

from collections.abc import Callable

import structlog
from pydantic import BaseModel

from typegraph.core.errors import ExtractionError
from typegraph.extract import classify, combinators, external, generics, objects, predicates
from typegraph.extract.context import ExtractionContext
from typegraph.model.nodes import AliasModel, PrefixModel, RefModel, UnidentifiedModel
from typegraph.oracle.records import Node, OracleType

log = structlog.get_logger(__name__)

Builder = Callable[[ExtractionContext, OracleType], BaseModel]


def include_type(ctx: ExtractionContext, type: OracleType) -> BaseModel:
    if predicates.is_keyof(type):
        return PrefixModel(value=include_type(ctx, type.operand))  # type: ignore[arg-type]

    name = type.alias_symbol.name if type.alias_symbol else None
    if not name and type.symbol is not None:
        name = type.symbol.name
    return get_type_model(ctx, type, name)


def get_type_model(ctx: ExtractionContext, type: OracleType, name: str | None = None) -> BaseModel:
    if predicates.is_type_parameter(type) and type.symbol is not None:
        return type_parameter_ref(ctx, type.symbol.name)

    if name:
        alias = type.alias_symbol
        if alias is not None and alias is not type.symbol:
            return make_alias_ref(ctx, type, name)

        ext = external.include_external(ctx, type)
        if ext is not None:
            return ext
        if not ctx.is_anonymous(name) and not predicates.is_anonymous_object(type):
            return make_ref(ctx, type, name, include_named)

    return include_anonymous(ctx, type)


def type_parameter_ref(ctx: ExtractionContext, name: str) -> RefModel:
    ctx.declare_local(name)
    return RefModel(ref_name=name)


def make_ref(ctx: ExtractionContext, type: OracleType, name: str, build: Builder) -> RefModel:
    """Register ``name`` (placeholder first, then body) and reference it."""
    if name not in ctx.refs:
        with ctx.entry_scope(name):
            ctx.refs.register_placeholder(name)
            target = type
            if predicates.is_reference(type) and type.target is not None:
                target = type.target
            ctx.refs.fill(name, build(ctx, target))

    return include_ref(ctx, type, name)


def make_alias_ref(ctx: ExtractionContext, type: OracleType, name: str) -> RefModel:
    alias = type.alias_symbol
    decl = predicates.first_declaration(alias)
    if alias is None or decl is None:
        raise ExtractionError.missing_declaration(name, "alias declaration")

    bound = external.external_name(ctx, alias)
    if bound is not None:
        name = bound
    elif name not in ctx.refs:
        with ctx.entry_scope(name):
            ctx.refs.register_placeholder(name)
            ctx.refs.fill(
                name,
                AliasModel(
                    comment=predicates.get_comment(ctx.checker, decl.symbol),
                    types=generics.get_declared_type_parameters(ctx, decl),
                    child=include_anonymous(ctx, ctx.checker.get_type_at_location(decl)),
                ),
            )

    types = [include_type(ctx, t) for t in type.alias_type_arguments or []]
    return RefModel(
        ref_name=name,
        types=generics.normalize_type_arguments(ctx, type, decl.type_parameters, types, name),
    )


def include_ref(
    ctx: ExtractionContext,
    type: OracleType,
    ref_name: str,
    external: OracleType | None = None,
) -> RefModel:
    decl = predicates.first_declaration(type.symbol)
    params = decl.type_parameters if decl is not None else []
    types = generics.get_type_arguments(ctx, type)
    return ctx.refs.resolve(
        ref_name,
        generics.normalize_type_arguments(ctx, type, params, types, ref_name),
        external=external,
    )


def ensure_named(ctx: ExtractionContext, type: OracleType, name: str) -> None:
    """Register the body of a named type without producing a reference."""
    if name not in ctx.refs:
        make_ref(ctx, type, name, include_named)


def include_named(ctx: ExtractionContext, type: OracleType) -> BaseModel:
    return _first_match(ctx, type, (classify.include_basic, objects.include_object))


def include_anonymous(ctx: ExtractionContext, type: OracleType) -> BaseModel:
    return _first_match(
        ctx,
        type,
        (
            classify.include_basic,
            combinators.include_combinator,
            external.include_hidden_anonymous,
            objects.include_object,
        ),
    )


def _first_match(
    ctx: ExtractionContext,
    type: OracleType,
    chain: tuple[Callable[[ExtractionContext, OracleType], BaseModel | None], ...],
) -> BaseModel:
    for build in chain:
        node = build(ctx, type)
        if node is not None:
            return node
    return unidentified(ctx, type)


def include_anonymous_node(ctx: ExtractionContext, node: Node) -> BaseModel:
    node_model = combinators.include_node(ctx, node)
    if node_model is not None:
        return node_model
    return include_anonymous(ctx, ctx.checker.get_type_from_type_node(node))


def unidentified(ctx: ExtractionContext, type: OracleType) -> UnidentifiedModel:
    ctx.stats.unidentified += 1
    log.debug("unsupported_construct", type=repr(type), flags=int(type.flags))
    return UnidentifiedModel()
