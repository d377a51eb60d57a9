"""External and hidden-anonymous resolution.

Types declared in the standard library, the ambient global scope or an
importable module are never expanded: they are registered as ``import``
entries and referenced by name. Anything declared in the program itself is
left to the local builders.
"""

from __future__ import annotations

import structlog
from pydantic import BaseModel

from typegraph.extract import dispatch, predicates
from typegraph.extract.context import ExtractionContext
from typegraph.extract.naming import SourceOrigin, SourceScope
from typegraph.model.nodes import ImportModel
from typegraph.oracle.records import OracleSymbol, OracleType

log = structlog.get_logger(__name__)


def include_external(ctx: ExtractionContext, type: OracleType) -> BaseModel | None:
    symbol = type.symbol
    if symbol is None:
        return None

    origin = _origin(ctx, symbol)
    if not origin.is_external:
        return None
    if ctx.is_anonymous(symbol.name):
        # Only importable modules hide named types behind anonymous ones
        if origin.scope is SourceScope.MODULE:
            return include_hidden_anonymous(ctx, type)
        return None
    if origin.scope is SourceScope.MODULE and predicates.is_anonymous_object(type):
        return None

    name = _bind(ctx, symbol, origin)
    live = None if origin.scope is SourceScope.GLOBAL else type
    return dispatch.include_ref(ctx, type, name, external=live)


def external_name(ctx: ExtractionContext, symbol: OracleSymbol) -> str | None:
    """Registry name of an external named symbol, or None for local ones."""
    origin = _origin(ctx, symbol)
    if not origin.is_external or ctx.is_anonymous(symbol.name):
        return None
    return _bind(ctx, symbol, origin)


def include_hidden_anonymous(ctx: ExtractionContext, type: OracleType) -> BaseModel | None:
    """Resolve a library's anonymous constructor/function type to its named container.

    Compilers synthesize anonymous types for e.g. the construct signature
    written inside a library alias; the user-facing name is a few
    declaration parents up.
    """
    symbol = type.symbol
    if symbol is None or not ctx.is_anonymous(symbol.name):
        return None

    decl = predicates.first_declaration(symbol)
    if not predicates.is_hidden_anonymous_declaration(decl):
        return None
    if _origin(ctx, symbol).scope is not SourceScope.MODULE:
        return None

    node = decl.parent  # type: ignore[union-attr]
    for _ in range(ctx.config.hidden_anonymous_max_hops):
        if node is None:
            break
        if predicates.is_named_container(node):
            container = node.symbol
            log.debug("hidden_anonymous_resolved", container=container.name)  # type: ignore[union-attr]
            declared = ctx.checker.get_declared_type_of_symbol(container)  # type: ignore[arg-type]
            return dispatch.include_type(ctx, declared)
        node = node.parent
    return None


def _origin(ctx: ExtractionContext, symbol: OracleSymbol) -> SourceOrigin:
    decl = predicates.first_declaration(symbol)
    return ctx.resolver.classify(decl.source_file_name() if decl is not None else None)


def _bind(ctx: ExtractionContext, symbol: OracleSymbol, origin: SourceOrigin) -> str:
    if origin.scope is SourceScope.GLOBAL:
        name = predicates.global_name(symbol)
    elif origin.scope is SourceScope.LIB:
        name = symbol.name
    else:
        name = ctx.resolver.create_binding(origin.module or "", symbol.name, ctx.refs)

    if name not in ctx.refs or ctx.refs.is_placeholder(name):
        ctx.refs[name] = ImportModel(
            name=symbol.name, module=origin.module, scope=origin.scope.value
        )
    return name
