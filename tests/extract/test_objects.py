"""Tests for extract/objects.py module.

Covers:
- Recursive and mutually recursive shapes
- Inherited member and index signature deduplication
- Members: optional, readonly, methods, comments, call signatures
- Classes: statics, constructors, implements
- Mapped types
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from typegraph.oracle import ProgramBuilder

Graph = Callable[..., dict[str, Any]]


def _ref(name: str, *types: dict[str, Any]) -> dict[str, Any]:
    return {"kind": "ref", "refName": name, "types": list(types)}


def _prop(name: str, value: dict[str, Any], **extra: Any) -> dict[str, Any]:
    return {"kind": "prop", "name": name, "modifiers": "", "optional": False, "valueType": value, **extra}


class TestRecursion:
    """Tests for self-referential shapes."""

    def test_self_reference(self, builder: ProgramBuilder, graph: Graph) -> None:
        """interface Node { value: number; next?: Node } terminates as a ref."""
        node = builder.interface("Node")
        builder.add_members(node, {"value": builder.number, "next": builder.prop(node, optional=True)})

        assert graph() == {
            "Node": {
                "kind": "interface",
                "extends": [],
                "props": [
                    _prop("value", {"kind": "number"}),
                    _prop("next", _ref("Node"), optional=True),
                ],
                "types": [],
            }
        }

    def test_mutual_recursion(self, builder: ProgramBuilder, extract: Any) -> None:
        """A -> B -> A yields one entry each and no dangling names."""
        a = builder.interface("A")
        b = builder.interface("B", {"a": a})
        builder.add_members(a, {"b": b})

        result = extract()

        data = result.graph.to_dict(include_prop_ids=False)
        assert list(data) == ["A", "B"]
        assert data["A"]["props"][0]["valueType"] == _ref("B")
        assert data["B"]["props"][0]["valueType"] == _ref("A")
        assert result.dangling == []

    def test_repeated_reference_registers_once(self, builder: ProgramBuilder, graph: Graph) -> None:
        """Two members of the same named type share one entry."""
        point = builder.interface("Point", {"x": builder.number}, export=False)
        builder.interface("Line", {"start": point, "end": point})

        result = graph()
        assert list(result) == ["Line", "Point"]
        assert [p["valueType"] for p in result["Line"]["props"]] == [_ref("Point"), _ref("Point")]


class TestInheritance:
    """Tests for extends/implements edges."""

    def test_inherited_members_not_repeated(self, builder: ProgramBuilder, graph: Graph) -> None:
        """Derived shapes list only their own members."""
        base = builder.interface("Base", {"id": builder.string})
        builder.interface("Derived", {"name": builder.string}, extends=[base])

        derived = graph()["Derived"]
        assert derived["extends"] == [_ref("Base")]
        assert [p["name"] for p in derived["props"]] == ["name"]

    def test_transitive_inheritance(self, builder: ProgramBuilder, graph: Graph) -> None:
        """Members from grandparents are excluded too."""
        root = builder.interface("Root", {"id": builder.string})
        mid = builder.interface("Mid", {"rank": builder.number}, extends=[root])
        builder.interface("Leaf", {"leaf": builder.boolean}, extends=[mid])

        result = graph()
        assert [p["name"] for p in result["Mid"]["props"]] == ["rank"]
        assert [p["name"] for p in result["Leaf"]["props"]] == ["leaf"]

    def test_diamond_inheritance(self, builder: ProgramBuilder, graph: Graph) -> None:
        """A root reached through two bases is excluded once, from both paths."""
        root = builder.interface("Root", {"id": builder.string})
        left = builder.interface("Left", {"left": builder.number}, extends=[root])
        right = builder.interface("Right", {"right": builder.boolean}, extends=[root])
        builder.interface("Bottom", {"bottom": builder.string}, extends=[left, right])

        result = graph()
        bottom = result["Bottom"]
        assert bottom["extends"] == [_ref("Left"), _ref("Right")]
        assert [p["name"] for p in bottom["props"]] == ["bottom"]
        assert [p["name"] for p in result["Left"]["props"]] == ["left"]
        assert [p["name"] for p in result["Right"]["props"]] == ["right"]
        assert [p["name"] for p in result["Root"]["props"]] == ["id"]

    def test_instantiated_base_members_excluded(
        self, builder: ProgramBuilder, graph: Graph
    ) -> None:
        """Members inherited through Box<string> are matched to their declarations."""
        t = builder.type_parameter("T")
        box = builder.interface("Box", {"value": t}, type_parameters=[t])
        builder.interface(
            "Label", {"text": builder.string}, extends=[builder.instantiate(box, builder.string)]
        )

        label = graph()["Label"]
        assert label["extends"] == [_ref("Box", {"kind": "string"})]
        assert [p["name"] for p in label["props"]] == ["text"]

    def test_inherited_index_signature_not_repeated(
        self, builder: ProgramBuilder, graph: Graph
    ) -> None:
        """An index signature declared on the base appears only on the base."""
        dictionary = builder.interface("Dict", string_index=builder.number)
        builder.interface("Named", {"name": builder.number}, extends=[dictionary])

        result = graph()
        assert [p["kind"] for p in result["Dict"]["props"]] == ["index"]
        assert [p["kind"] for p in result["Named"]["props"]] == ["prop"]

    def test_class_keeps_implemented_members(self, builder: ProgramBuilder, graph: Graph) -> None:
        """A class implementing an interface declares those members itself."""
        named = builder.interface("Named", {"name": builder.string})
        builder.class_("Person", {"name": builder.string}, implements=[named])

        person = graph()["Person"]
        assert person["kind"] == "class"
        assert person["implements"] == [_ref("Named")]
        assert [p["name"] for p in person["props"]] == ["name"]

    def test_class_extends_class(self, builder: ProgramBuilder, graph: Graph) -> None:
        """Subclasses drop members declared on their superclass."""
        animal = builder.class_("Animal", {"name": builder.string})
        builder.class_(
            "Dog", {"bark": builder.method([], builder.void)}, extends=animal
        )

        dog = graph()["Dog"]
        assert dog["extends"] == [_ref("Animal")]
        assert [p["name"] for p in dog["props"]] == ["bark"]


class TestMembers:
    """Tests for member classification."""

    def test_optional_readonly_and_comment(self, builder: ProgramBuilder, graph: Graph) -> None:
        """Member flags, modifiers and docs are carried over."""
        builder.interface(
            "Config",
            {
                "path": builder.prop(builder.string, modifiers=["readonly"], doc="Where to write"),
                "mode": builder.prop(builder.number, optional=True),
            },
            doc="Writer settings",
        )

        config = graph()["Config"]
        assert config["comment"] == "Writer settings"
        assert config["props"] == [
            _prop("path", {"kind": "string"}, modifiers="readonly", comment="Where to write"),
            _prop("mode", {"kind": "number"}, optional=True),
        ]

    def test_method(self, builder: ProgramBuilder, graph: Graph) -> None:
        """Methods become props whose value is a function."""
        builder.interface(
            "Api",
            {
                "get": builder.method(
                    [builder.param("id", builder.string), builder.param("rest", builder.any, rest=True)],
                    builder.number,
                )
            },
        )

        value = graph()["Api"]["props"][0]["valueType"]
        assert value["kind"] == "function"
        assert value["returnType"] == {"kind": "number"}
        assert [(p["param"], p["spread"]) for p in value["parameters"]] == [
            ("id", False),
            ("rest", True),
        ]

    def test_index_signatures(self, builder: ProgramBuilder, graph: Graph) -> None:
        """Number index comes before string index, each with its key name."""
        builder.interface(
            "Table",
            string_index=builder.index_signature(builder.string, "column"),
            number_index=builder.index_signature(builder.boolean, None),
        )

        props = graph()["Table"]["props"]
        assert props == [
            {
                "kind": "index",
                "parameters": [
                    {
                        "kind": "parameter",
                        "param": "key",
                        "modifiers": "",
                        "spread": False,
                        "optional": False,
                        "value": {"kind": "number"},
                    }
                ],
                "optional": False,
                "valueType": {"kind": "boolean"},
            },
            {
                "kind": "index",
                "parameters": [
                    {
                        "kind": "parameter",
                        "param": "column",
                        "modifiers": "",
                        "spread": False,
                        "optional": False,
                        "value": {"kind": "string"},
                    }
                ],
                "optional": False,
                "valueType": {"kind": "string"},
            },
        ]

    def test_call_signature(self, builder: ProgramBuilder, graph: Graph) -> None:
        """Call signatures are listed after the members."""
        builder.interface(
            "Formatter",
            {"name": builder.string},
            call_signatures=[builder.signature([builder.param("x", builder.number)], builder.string)],
        )

        props = graph()["Formatter"]["props"]
        assert [p["kind"] for p in props] == ["prop", "function"]
        assert props[1]["returnType"] == {"kind": "string"}

    def test_prop_ids_identify_members(self, builder: ProgramBuilder, extract: Any) -> None:
        """Serialized prop ids are the oracle identities of the members."""
        node = builder.interface("Node", {"value": builder.number})

        data = extract().graph.to_dict()

        assert data["Node"]["props"][0]["id"] == node.properties[0].id


class TestClasses:
    """Tests for class shapes."""

    def test_statics_and_constructor(self, builder: ProgramBuilder, graph: Graph) -> None:
        """Statics follow instance members; constructors come last."""
        builder.class_(
            "Point",
            {"x": builder.number},
            statics={"origin": builder.number},
            constructors=[[builder.param("x", builder.number)]],
            doc="A point",
        )

        point = graph()["Point"]
        assert point["comment"] == "A point"
        props = point["props"]
        assert [p["kind"] for p in props] == ["prop", "prop", "constructor"]
        assert props[1]["name"] == "origin"
        assert props[1]["modifiers"] == "static"
        assert props[2]["parameters"][0]["param"] == "x"
        assert props[2]["returnType"] == _ref("Point")


class TestMapped:
    """Tests for mapped types."""

    def test_optional_mapped_over_alias(self, builder: ProgramBuilder, graph: Graph) -> None:
        """{ [K in Keys]?: boolean } keeps its key, constraint and optionality."""
        keys = builder.alias("Keys", builder.union(builder.literal("a"), builder.literal("b")))
        builder.alias("Flags", builder.mapped("K", keys, builder.boolean, optional=True))

        result = graph()
        assert result["Flags"]["child"]["mapped"] == {
            "kind": "mapped",
            "name": "K",
            "constraint": _ref("Keys"),
            "optional": True,
            "value": {"kind": "boolean"},
        }
        assert result["Keys"]["child"]["kind"] == "union"

    def test_value_uses_key(self, builder: ProgramBuilder, extract: Any) -> None:
        """The key is a local name of the mapped type's entry."""
        node = builder.interface("Node", {"value": builder.number})
        builder.alias(
            "Getters",
            builder.mapped(
                "K",
                builder.keyof(node),
                lambda k: builder.indexed_access(node, k),
            ),
        )

        result = extract()

        mapped = result.graph.to_dict()["Getters"]["child"]["mapped"]
        assert mapped["constraint"] == {"kind": "prefix", "prefix": "keyof", "value": _ref("Node")}
        assert mapped["value"] == {"kind": "indexedAccess", "index": _ref("K"), "object": _ref("Node")}
        assert mapped["optional"] is False
        assert result.dangling == []
