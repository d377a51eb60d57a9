"""Ref Registry: the name -> TypeModel map of one extraction run.

Named types are registered before their body is built. A request for the
same name while the body is still under construction sees the placeholder
and gets a ``ref`` back instead of recursing, which is what terminates
self-referential and mutually recursive types.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import structlog
from pydantic import BaseModel

from typegraph.model.nodes import (
    AliasModel,
    ClassModel,
    ConstructorModel,
    FunctionModel,
    InterfaceModel,
    RefModel,
)

log = structlog.get_logger(__name__)

_GENERIC_ENTRIES = (AliasModel, InterfaceModel, ClassModel, FunctionModel, ConstructorModel)


class RefRegistry:
    def __init__(self) -> None:
        self._entries: dict[str, BaseModel] = {}
        self._placeholders: set[str] = set()

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, name: str) -> BaseModel:
        return self._entries[name]

    def __setitem__(self, name: str, node: BaseModel) -> None:
        """Register ``node`` under ``name`` unconditionally."""
        self._entries[name] = node
        self._placeholders.discard(name)
        log.debug("ref_registered", name=name, kind=getattr(node, "kind", None))

    def get(self, name: str) -> BaseModel | None:
        return self._entries.get(name)

    def register_placeholder(self, name: str) -> bool:
        """Reserve ``name`` with a self-reference. Returns False if already present."""
        if name in self._entries:
            return False
        self._entries[name] = RefModel(ref_name=name)
        self._placeholders.add(name)
        return True

    def fill(self, name: str, node: BaseModel) -> None:
        self[name] = node

    def is_placeholder(self, name: str) -> bool:
        return name in self._placeholders

    def placeholders(self) -> list[str]:
        return [name for name in self._entries if name in self._placeholders]

    def resolve(
        self, name: str, type_arguments: list[Any] | None = None, external: Any = None
    ) -> RefModel:
        """A reference to ``name``, registering a placeholder if it is unknown."""
        self.register_placeholder(name)
        return RefModel(ref_name=name, types=list(type_arguments or []), external=external)

    def declared_parameter_count(self, name: str) -> int | None:
        """Type parameters declared by the entry, or None when unknown or unbounded."""
        entry = self._entries.get(name)
        if name in self._placeholders or not isinstance(entry, _GENERIC_ENTRIES):
            return None
        return len(entry.types)

    def entries(self) -> dict[str, BaseModel]:
        return dict(self._entries)
