"""Module driver: walk a module's exports and build its type graph.

Usage::

    program = build_program()
    result = extract_module(program)
    result.graph.to_json()
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import StrEnum

import structlog

from typegraph.config.constants import DEFAULT_EXPORT_NAME
from typegraph.config.models import TypeGraphConfig
from typegraph.core.errors import ExtractionError, InternalError, TypeGraphError
from typegraph.core.logging import bind_run_id, get_run_id, reset_run_id
from typegraph.extract import entry
from typegraph.extract.context import ExtractionContext, ExtractionStats
from typegraph.extract.naming import ImportResolver, ModuleResolver
from typegraph.extract.registry import RefRegistry
from typegraph.model.graph import TypeGraph
from typegraph.oracle.flags import SymbolFlags
from typegraph.oracle.protocol import OracleProgram
from typegraph.oracle.records import OracleSymbol

log = structlog.get_logger(__name__)


class RootKind(StrEnum):
    DEFAULT = "default"
    ALIAS = "alias"
    FUNCTION = "function"
    TYPE = "type"
    VARIABLE = "variable"


@dataclass
class RootFailure:
    """An exported declaration whose extraction raised."""

    name: str
    kind: RootKind
    error: TypeGraphError


@dataclass
class ExtractionResult:
    graph: TypeGraph
    stats: ExtractionStats
    failures: list[RootFailure] = field(default_factory=list)
    # Referenced names with no entry, plus placeholders never filled
    dangling: list[str] = field(default_factory=list)
    elapsed_ms: float = 0.0
    run_id: str | None = None

    @property
    def ok(self) -> bool:
        return not self.failures and not self.dangling


def root_kind(symbol: OracleSymbol) -> RootKind | None:
    if symbol.name == DEFAULT_EXPORT_NAME:
        return RootKind.DEFAULT
    if symbol.flags & SymbolFlags.TYPE_ALIAS:
        return RootKind.ALIAS
    if symbol.flags & SymbolFlags.FUNCTION:
        return RootKind.FUNCTION
    if symbol.flags & (
        SymbolFlags.CLASS
        | SymbolFlags.INTERFACE
        | SymbolFlags.REGULAR_ENUM
        | SymbolFlags.CONST_ENUM
    ):
        return RootKind.TYPE
    if symbol.flags & SymbolFlags.VARIABLE:
        return RootKind.VARIABLE
    return None


def extract_root(ctx: ExtractionContext, symbol: OracleSymbol, kind: RootKind) -> None:
    """Run the entry walker matching ``kind`` for one exported symbol."""
    decl = symbol.declarations[0] if symbol.declarations else None

    if kind is RootKind.TYPE:
        entry.include_exported_type(ctx, ctx.checker.get_declared_type_of_symbol(symbol))
        return
    if decl is None:
        raise ExtractionError.missing_declaration(symbol.name, "declaration")

    if kind is RootKind.DEFAULT:
        entry.include_default_export(ctx, decl)
    elif kind is RootKind.ALIAS:
        entry.include_exported_type_alias(ctx, decl)
    elif kind is RootKind.FUNCTION:
        entry.include_exported_function(ctx, symbol.value_declaration or decl, symbol.name)
    elif kind is RootKind.VARIABLE:
        entry.include_exported_variable(ctx, symbol.value_declaration or decl)
    else:
        raise InternalError.unexpected(f"unhandled root kind {kind!r}", name=symbol.name)


def extract_module(
    program: OracleProgram,
    *,
    resolver: ModuleResolver | None = None,
    config: TypeGraphConfig | None = None,
) -> ExtractionResult:
    """Extract every exported declaration of ``program.module``.

    Raises:
        TypeGraphError: A root failed and roots are not isolated, or
            ``strict_refs`` is set and references are left dangling.
    """
    config = config or TypeGraphConfig()
    # A run id bound by the caller spans this run; otherwise the run gets its own
    token = bind_run_id() if get_run_id() is None else None
    try:
        return _extract(program, resolver, config)
    finally:
        if token is not None:
            reset_run_id(token)


def _extract(
    program: OracleProgram, resolver: ModuleResolver | None, config: TypeGraphConfig
) -> ExtractionResult:
    ctx = ExtractionContext(
        checker=program.checker,
        refs=RefRegistry(),
        resolver=resolver or ImportResolver(config.libraries),
        config=config.extraction,
    )
    failures: list[RootFailure] = []
    start = time.perf_counter()

    exports = program.checker.get_exports_of_module(program.module)
    log.info("extraction_started", module=program.module.name, exports=len(exports))

    for symbol in exports:
        kind = root_kind(symbol)
        if kind is None:
            ctx.stats.roots_skipped += 1
            log.debug("root_skipped", name=symbol.name, flags=int(symbol.flags))
            continue

        if not ctx.config.isolate_roots:
            extract_root(ctx, symbol, kind)
        else:
            try:
                extract_root(ctx, symbol, kind)
            except TypeGraphError as e:
                ctx.stats.roots_failed += 1
                failures.append(RootFailure(name=symbol.name, kind=kind, error=e))
                log.warning("root_failed", name=symbol.name, kind=kind.value, error=str(e))
                continue

        ctx.stats.roots_extracted += 1
        log.debug("root_extracted", name=symbol.name, kind=kind.value)

    graph = TypeGraph(ctx.refs.entries(), local_names=ctx.local_names)
    dangling = list(dict.fromkeys([*graph.dangling_refs(), *ctx.refs.placeholders()]))
    ctx.stats.entries = len(graph)
    ctx.stats.dangling = len(dangling)

    if dangling:
        log.warning("dangling_refs", names=dangling)
        if ctx.config.strict_refs:
            raise ExtractionError.dangling_refs(dangling)

    elapsed_ms = (time.perf_counter() - start) * 1000
    log.info(
        "extraction_complete",
        entries=ctx.stats.entries,
        roots=ctx.stats.roots_extracted,
        failed=ctx.stats.roots_failed,
        unidentified=ctx.stats.unidentified,
        elapsed_ms=round(elapsed_ms, 1),
    )
    return ExtractionResult(
        graph=graph,
        stats=ctx.stats,
        failures=failures,
        dangling=dangling,
        elapsed_ms=elapsed_ms,
        run_id=get_run_id(),
    )
