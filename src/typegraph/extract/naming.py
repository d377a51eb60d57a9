"""Source classification and import binding names.

The engine asks two questions about declarations it meets outside the
program under extraction: where does this file come from, and under which
name should a type exported from that module be referenced.
"""

from __future__ import annotations

import fnmatch
from collections.abc import Container
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol

import structlog

from typegraph.config.models import LibrariesConfig

log = structlog.get_logger(__name__)


class SourceScope(StrEnum):
    LIB = "lib"
    GLOBAL = "global"
    MODULE = "module"
    LOCAL = "local"


@dataclass(frozen=True, slots=True)
class SourceOrigin:
    scope: SourceScope
    module: str | None = None

    @property
    def is_external(self) -> bool:
        return self.scope is not SourceScope.LOCAL


LOCAL = SourceOrigin(SourceScope.LOCAL)


class ModuleResolver(Protocol):
    def classify(self, file_name: str | None) -> SourceOrigin: ...

    def create_binding(self, module: str, name: str, taken: Container[str] = ()) -> str: ...


class ImportResolver:
    """Glob-based ``ModuleResolver``.

    Files are matched in order against base-library patterns, global
    patterns, then each configured module's patterns. Bindings are stable
    per (module, name): the bare name when free, otherwise ``name_1``,
    ``name_2``, ...
    """

    def __init__(self, config: LibrariesConfig | None = None) -> None:
        self._config = config or LibrariesConfig()
        self._bindings: dict[tuple[str, str], str] = {}
        self._owners: dict[str, tuple[str, str]] = {}

    def classify(self, file_name: str | None) -> SourceOrigin:
        if not file_name:
            return LOCAL
        if _matches(file_name, self._config.base_lib_patterns):
            return SourceOrigin(SourceScope.LIB)
        if _matches(file_name, self._config.global_patterns):
            return SourceOrigin(SourceScope.GLOBAL)
        for module, patterns in self._config.modules.items():
            if _matches(file_name, patterns):
                return SourceOrigin(SourceScope.MODULE, module)
        return LOCAL

    def create_binding(self, module: str, name: str, taken: Container[str] = ()) -> str:
        key = (module, name)
        if key in self._bindings:
            return self._bindings[key]

        binding = name
        suffix = 0
        while binding in self._owners or binding in taken:
            suffix += 1
            binding = f"{name}_{suffix}"

        self._bindings[key] = binding
        self._owners[binding] = key
        if binding != name:
            log.debug("binding_renamed", module=module, name=name, binding=binding)
        return binding

    @property
    def bindings(self) -> dict[tuple[str, str], str]:
        return dict(self._bindings)


def _matches(file_name: str, patterns: list[str]) -> bool:
    return any(fnmatch.fnmatch(file_name, pattern) for pattern in patterns)
