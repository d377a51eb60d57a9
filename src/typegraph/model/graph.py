"""Serializable result of one extraction run."""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping
from typing import Any

from pydantic import BaseModel, TypeAdapter

from typegraph.model.nodes import RefModel, TypeModel

_node_adapter: TypeAdapter[Any] = TypeAdapter(TypeModel)


class TypeGraph(Mapping[str, BaseModel]):
    """Read-only view over the final name -> TypeModel mapping.

    Insertion order follows the order entries were first requested, which is
    deterministic for a given program.
    """

    def __init__(
        self,
        entries: Mapping[str, BaseModel],
        *,
        local_names: Mapping[str, frozenset[str]] | None = None,
    ) -> None:
        self._entries = dict(entries)
        # Type parameters, mapped keys and infer variables declared per entry
        self._local_names = dict(local_names or {})

    def __getitem__(self, name: str) -> BaseModel:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"TypeGraph({len(self)} entries)"

    def to_dict(self, *, include_prop_ids: bool = True) -> dict[str, Any]:
        data = {
            name: node.model_dump(by_alias=True, exclude_none=True, mode="json")
            for name, node in self._entries.items()
        }
        if not include_prop_ids:
            for node in data.values():
                _drop_prop_ids(node)
        return data

    def to_json(self, *, indent: int | None = 2, include_prop_ids: bool = True) -> str:
        return json.dumps(self.to_dict(include_prop_ids=include_prop_ids), indent=indent)

    def dangling_refs(self) -> list[str]:
        """Names referenced somewhere in the graph that have no entry."""
        missing: dict[str, None] = {}
        for name, node in self._entries.items():
            local = self._local_names.get(name, frozenset())
            for ref in iter_refs(node):
                if ref.ref_name not in self._entries and ref.ref_name not in local:
                    missing[ref.ref_name] = None
        return list(missing)


def iter_refs(node: Any) -> Iterator[RefModel]:
    """Yield every ``ref`` node reachable from ``node``."""
    if isinstance(node, RefModel):
        yield node
        for child in node.types:
            yield from iter_refs(child)
    elif isinstance(node, BaseModel):
        for field_name in type(node).model_fields:
            yield from iter_refs(getattr(node, field_name))
    elif isinstance(node, list):
        for item in node:
            yield from iter_refs(item)


def _drop_prop_ids(data: Any) -> None:
    if isinstance(data, dict):
        if data.get("kind") == "prop":
            data.pop("id", None)
        for value in data.values():
            _drop_prop_ids(value)
    elif isinstance(data, list):
        for item in data:
            _drop_prop_ids(item)


def validate_node(data: dict[str, Any]) -> BaseModel:
    """Parse a serialized node back into its TypeModel variant."""
    return _node_adapter.validate_python(data)
