"""Tests for model/graph.py module.

Covers:
- TypeGraph mapping behavior
- to_dict() / to_json() serialization
- dangling_refs() detection
- iter_refs() traversal
"""

from __future__ import annotations

import json

from typegraph.model import (
    AliasModel,
    InterfaceModel,
    PropModel,
    TypeGraph,
    TypeParameterModel,
    UnionModel,
    iter_refs,
    primitive,
    ref,
)


def _node_graph() -> TypeGraph:
    node = InterfaceModel(
        props=[
            PropModel(name="value", member_id=1, value_type=primitive("number")),
            PropModel(name="next", member_id=2, optional=True, value_type=ref("Node")),
        ]
    )
    return TypeGraph({"Node": node})


class TestTypeGraphMapping:
    """Tests for the read-only mapping interface."""

    def test_len_and_lookup(self) -> None:
        """Behaves like a mapping of entry names."""
        graph = _node_graph()

        assert len(graph) == 1
        assert "Node" in graph
        assert isinstance(graph["Node"], InterfaceModel)
        assert list(graph) == ["Node"]

    def test_input_is_copied(self) -> None:
        """Mutating the source mapping does not change the graph."""
        entries = {"A": primitive("string")}
        graph = TypeGraph(entries)
        entries["B"] = primitive("number")

        assert "B" not in graph


class TestSerialization:
    """Tests for to_dict and to_json."""

    def test_to_dict_uses_wire_names(self) -> None:
        """Entries serialize with camelCase names and without None fields."""
        data = _node_graph().to_dict()

        prop = data["Node"]["props"][1]
        assert prop["valueType"] == {"kind": "ref", "refName": "Node", "types": []}
        assert "comment" not in prop

    def test_prop_ids_can_be_dropped(self) -> None:
        """include_prop_ids=False removes every prop id."""
        data = _node_graph().to_dict(include_prop_ids=False)

        assert all("id" not in p for p in data["Node"]["props"])

    def test_to_json_round_trips(self) -> None:
        """JSON text parses back into the same dict."""
        graph = _node_graph()

        assert json.loads(graph.to_json(indent=None)) == graph.to_dict()

    def test_entry_order_preserved(self) -> None:
        """Serialized entries keep insertion order."""
        graph = TypeGraph({"B": primitive("string"), "A": primitive("number")})

        assert list(graph.to_dict()) == ["B", "A"]


class TestDanglingRefs:
    """Tests for dangling_refs."""

    def test_self_reference_is_not_dangling(self) -> None:
        """A recursive entry resolves to itself."""
        assert _node_graph().dangling_refs() == []

    def test_missing_entry_reported_once(self) -> None:
        """A name referenced twice without an entry is reported once."""
        graph = TypeGraph(
            {"Pair": UnionModel(types=[ref("Missing"), ref("Missing"), primitive("null")])}
        )

        assert graph.dangling_refs() == ["Missing"]

    def test_local_names_are_exempt(self) -> None:
        """Type parameters declared by an entry are not dangling inside it."""
        box = AliasModel(
            types=[TypeParameterModel(parameter=ref("T"))],
            child=ref("T"),
        )

        assert TypeGraph({"Box": box}).dangling_refs() == ["T"]
        graph = TypeGraph({"Box": box}, local_names={"Box": frozenset({"T"})})
        assert graph.dangling_refs() == []

    def test_local_names_do_not_leak_between_entries(self) -> None:
        """A name local to one entry is still dangling in another."""
        graph = TypeGraph(
            {"Box": ref("T"), "Other": ref("T")},
            local_names={"Box": frozenset({"T"})},
        )

        assert graph.dangling_refs() == ["T"]


class TestIterRefs:
    """Tests for iter_refs."""

    def test_finds_refs_in_type_arguments(self) -> None:
        """Refs nested in type arguments are yielded."""
        node = ref("Map", [ref("Key"), primitive("number")])

        assert [r.ref_name for r in iter_refs(node)] == ["Map", "Key"]

    def test_finds_refs_in_nested_models(self) -> None:
        """Refs inside props and unions are yielded."""
        names = [r.ref_name for r in iter_refs(_node_graph()["Node"])]

        assert names == ["Node"]
