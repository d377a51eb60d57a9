"""Entry-point walker: one registry root per exported declaration."""

from __future__ import annotations

import structlog

from typegraph.config.constants import DEFAULT_EXPORT_NAME, SYNTHETIC_DEFAULT_NAME
from typegraph.core.errors import ExtractionError
from typegraph.extract import dispatch, generics, objects, predicates
from typegraph.extract.context import ExtractionContext
from typegraph.model.nodes import AliasModel, ConstModel, DefaultModel, RefModel
from typegraph.oracle.flags import NodeKind, SymbolFlags
from typegraph.oracle.records import Node, OracleSymbol, OracleType

log = structlog.get_logger(__name__)

_TYPE_SYMBOLS = (
    SymbolFlags.CLASS | SymbolFlags.INTERFACE | SymbolFlags.REGULAR_ENUM | SymbolFlags.CONST_ENUM
)


def include_exported_type(ctx: ExtractionContext, type: OracleType) -> None:
    """Register an exported class, interface or enum under its own name."""
    if type.symbol is None:
        raise ExtractionError.missing_declaration(repr(type), "symbol")

    name = type.symbol.name
    with ctx.entry_scope(name):
        node = dispatch.include_type(ctx, type)

    # A ref means the type registered itself on the way
    if not isinstance(node, RefModel):
        ctx.refs[name] = node


def include_exported_type_alias(ctx: ExtractionContext, decl: Node) -> None:
    name = _declared_name(decl)
    if decl.type is None:
        raise ExtractionError.missing_declaration(name, "aliased type")

    with ctx.entry_scope(name):
        ctx.refs.register_placeholder(name)
        ctx.refs[name] = AliasModel(
            comment=predicates.get_comment(ctx.checker, decl.symbol),
            types=generics.get_declared_type_parameters(ctx, decl),
            child=objects.get_parameter_type(ctx, decl.type),
        )


def include_exported_variable(ctx: ExtractionContext, decl: Node) -> None:
    name = _declared_name(decl)
    if decl.type is not None:
        type = ctx.checker.get_type_from_type_node(decl.type)
    elif decl.initializer is not None:
        type = ctx.checker.get_type_at_location(decl.initializer)
    else:
        raise ExtractionError.missing_declaration(name, "type annotation or initializer")

    with ctx.entry_scope(name):
        ctx.refs[name] = ConstModel(
            comment=predicates.get_comment(ctx.checker, decl.symbol),
            value=dispatch.include_type(ctx, type),
        )


def include_exported_function(ctx: ExtractionContext, decl: Node, name: str) -> None:
    type = ctx.checker.get_type_at_location(decl)
    signatures = ctx.checker.get_call_signatures(type)
    if not signatures:
        raise ExtractionError.missing_signature(name)

    with ctx.entry_scope(name):
        function = objects.get_function_type(ctx, signatures[0])
        function.comment = predicates.get_comment(ctx.checker, decl.symbol)
        ctx.refs[name] = function


def include_default_export(ctx: ExtractionContext, node: Node) -> None:
    """Register ``default`` as a ref to the entry the default export names.

    ``export default Name`` reuses the entry of the exported declaration;
    an unnamed expression or a bare ``export default function`` is
    registered under a synthetic name first.
    """
    if node.kind is NodeKind.FUNCTION:
        include_exported_function(ctx, node, SYNTHETIC_DEFAULT_NAME)
        value = ctx.refs.resolve(SYNTHETIC_DEFAULT_NAME)
    else:
        if node.expression is None:
            raise ExtractionError.missing_declaration(DEFAULT_EXPORT_NAME, "expression")
        type = ctx.checker.get_type_at_location(node.expression)
        symbol = ctx.checker.get_symbol_at_location(node.expression)

        if symbol is not None:
            _include_named_default(ctx, symbol)
            value = dispatch.include_ref(ctx, type, symbol.name)
        else:
            with ctx.entry_scope(SYNTHETIC_DEFAULT_NAME):
                ctx.refs[SYNTHETIC_DEFAULT_NAME] = ConstModel(
                    value=dispatch.include_anonymous(ctx, type)
                )
            # the synthetic entry is never generic
            value = ctx.refs.resolve(SYNTHETIC_DEFAULT_NAME)

    ctx.refs[DEFAULT_EXPORT_NAME] = DefaultModel(
        comment=predicates.get_comment(ctx.checker, node.symbol),
        value=value,
    )


def _include_named_default(ctx: ExtractionContext, symbol: OracleSymbol) -> None:
    if symbol.flags & SymbolFlags.TYPE_ALIAS:
        decl = predicates.first_declaration(symbol)
        if decl is None:
            raise ExtractionError.missing_declaration(symbol.name, "declaration")
        include_exported_type_alias(ctx, decl)
    elif symbol.flags & SymbolFlags.FUNCTION:
        if symbol.value_declaration is None:
            raise ExtractionError.missing_declaration(symbol.name, "declaration")
        include_exported_function(ctx, symbol.value_declaration, symbol.name)
    elif symbol.flags & _TYPE_SYMBOLS:
        include_exported_type(ctx, ctx.checker.get_declared_type_of_symbol(symbol))
    else:
        if symbol.value_declaration is None:
            raise ExtractionError.missing_declaration(symbol.name, "declaration")
        include_exported_variable(ctx, symbol.value_declaration)


def _declared_name(decl: Node) -> str:
    name = decl.name or (decl.symbol.name if decl.symbol else None)
    if not name:
        raise ExtractionError.missing_declaration(repr(decl), "name")
    return name
