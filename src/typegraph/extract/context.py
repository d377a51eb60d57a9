"""Per-run extraction state passed to every builder."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import TracebackType

from typegraph.config.models import ExtractionConfig
from typegraph.extract.naming import ImportResolver, ModuleResolver
from typegraph.extract.registry import RefRegistry
from typegraph.oracle.protocol import TypeChecker


@dataclass
class ExtractionStats:
    """Counters for one extraction run."""

    roots_extracted: int = 0
    roots_failed: int = 0
    roots_skipped: int = 0
    entries: int = 0
    unidentified: int = 0
    dangling: int = 0


class EntryScope:
    """Collects the local names declared while the body of one entry is built.

    Must not be a generator context manager: contextlib writes
    ``__traceback__`` onto errors passing through, and the frozen error
    types reject attribute writes.
    """

    def __init__(self, ctx: ExtractionContext, name: str) -> None:
        self._ctx = ctx
        self._name = name

    def __enter__(self) -> None:
        self._ctx._scopes.append(set())

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        declared = self._ctx._scopes.pop()
        if declared:
            local_names = self._ctx.local_names
            local_names[self._name] = local_names.get(self._name, frozenset()) | declared
        return False


@dataclass(eq=False)
class ExtractionContext:
    checker: TypeChecker
    refs: RefRegistry = field(default_factory=RefRegistry)
    resolver: ModuleResolver = field(default_factory=ImportResolver)
    config: ExtractionConfig = field(default_factory=ExtractionConfig)
    stats: ExtractionStats = field(default_factory=ExtractionStats)
    # Entry name -> type parameter, mapped key and infer names declared inside it
    local_names: dict[str, frozenset[str]] = field(default_factory=dict)
    _scopes: list[set[str]] = field(default_factory=list, repr=False)

    def entry_scope(self, name: str) -> EntryScope:
        return EntryScope(self, name)

    def declare_local(self, name: str) -> None:
        if self._scopes:
            self._scopes[-1].add(name)

    def is_anonymous(self, name: str | None) -> bool:
        return not name or name.startswith(self.config.anonymous_prefix)
