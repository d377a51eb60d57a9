"""Tests for oracle/memory.py module.

Covers:
- InMemoryChecker query answers and failures
- ProgramBuilder declarations, instantiations and syntax
"""

from __future__ import annotations

import pytest

from typegraph.core.errors import ErrorCode, OracleError
from typegraph.oracle import InMemoryChecker, Node, NodeKind, OracleSymbol, ProgramBuilder
from typegraph.oracle.flags import HeritageToken, IndexKind, ObjectFlags, SymbolFlags, TypeFlags


class TestInMemoryChecker:
    """Tests for InMemoryChecker."""

    def test_unbound_node_raises_oracle_error(self) -> None:
        """Unknown locations surface as OracleError, never KeyError."""
        checker = InMemoryChecker()

        with pytest.raises(OracleError) as exc_info:
            checker.get_type_at_location(Node(kind=NodeKind.TYPE_NODE))

        assert exc_info.value.code == ErrorCode.ORACLE_UNKNOWN_NODE

    def test_undeclared_symbol_raises_query_failed(self) -> None:
        """A symbol with no declared type fails the query."""
        checker = InMemoryChecker()

        with pytest.raises(OracleError) as exc_info:
            checker.get_declared_type_of_symbol(OracleSymbol(name="X"))

        assert exc_info.value.code == ErrorCode.ORACLE_QUERY_FAILED

    def test_symbol_type_falls_back_to_annotation(self, builder: ProgramBuilder) -> None:
        """A symbol without its own binding takes the type of its annotation."""
        decl = Node(kind=NodeKind.PARAMETER, name="p")
        decl.type = builder.type_node(builder.string, parent=decl)
        symbol = OracleSymbol(name="p", declarations=[decl])

        result = builder.checker.get_type_of_symbol_at_location(symbol, decl)

        assert result is builder.string

    def test_index_info_by_kind(self, builder: ProgramBuilder) -> None:
        """Index info lookup distinguishes string from number signatures."""
        dict_type = builder.interface("Dict", string_index=builder.number)

        checker = builder.checker
        assert checker.get_index_info_of_type(dict_type, IndexKind.STRING) is not None
        assert checker.get_index_info_of_type(dict_type, IndexKind.NUMBER) is None
        assert checker.get_string_index_type(dict_type) is builder.number


class TestProgramBuilderTerminals:
    """Tests for intrinsic and literal types."""

    def test_literals_are_cached_per_value(self, builder: ProgramBuilder) -> None:
        """The same literal value yields the same type object."""
        assert builder.literal("a") is builder.literal("a")
        assert builder.literal(1) is not builder.literal("1")

    def test_boolean_literals_are_intrinsics(self, builder: ProgramBuilder) -> None:
        """true and false map onto the boolean literal intrinsics."""
        assert builder.literal(True) is builder.true_
        assert builder.literal(False) is builder.false_

    def test_boolean_is_union_of_literals(self, builder: ProgramBuilder) -> None:
        """boolean carries both the BOOLEAN and UNION flags."""
        assert builder.boolean.flags & TypeFlags.BOOLEAN
        assert builder.boolean.flags & TypeFlags.UNION
        assert builder.boolean.types == [builder.false_, builder.true_]

    def test_tuples_of_same_arity_share_target(self, builder: ProgramBuilder) -> None:
        """Tuple references of equal arity point at one tuple target."""
        a = builder.tuple(builder.string, builder.number)
        b = builder.tuple(builder.number, builder.string)

        assert a.target is b.target
        assert a.target is not None
        assert a.target.object_flags & ObjectFlags.TUPLE


class TestProgramBuilderDeclarations:
    """Tests for declaration builders."""

    def test_interface_is_exported(self, builder: ProgramBuilder) -> None:
        """Declared interfaces are exports of the module."""
        node = builder.interface("Node", {"value": builder.number})

        assert node.symbol in builder.module.exports
        assert [p.name for p in node.properties] == ["value"]

    def test_unexported_declaration(self, builder: ProgramBuilder) -> None:
        """export=False keeps the declaration out of the module exports."""
        hidden = builder.interface("Hidden", export=False)

        assert hidden.symbol not in builder.module.exports

    def test_interface_inherits_base_members(self, builder: ProgramBuilder) -> None:
        """Derived interfaces see base members after their own."""
        base = builder.interface("Base", {"id": builder.string})
        derived = builder.interface("Derived", {"name": builder.string}, extends=[base])

        assert [p.name for p in derived.properties] == ["name", "id"]
        assert derived.properties[1] is base.properties[0]

    def test_interface_records_heritage(self, builder: ProgramBuilder) -> None:
        """extends clauses carry identifier expressions bound to the base type."""
        base = builder.interface("Base")
        derived = builder.interface("Derived", extends=[base])

        decl = derived.symbol.declarations[0]  # type: ignore[union-attr]
        clause = decl.heritage_clauses[0]
        assert clause.token is HeritageToken.EXTENDS
        assert clause.types[0].expression.name == "Base"  # type: ignore[union-attr]
        assert builder.checker.get_type_at_location(clause.types[0]) is base

    def test_instantiation_points_members_at_declaration(self, builder: ProgramBuilder) -> None:
        """Instantiated properties keep the declared member as target."""
        t = builder.type_parameter("T")
        box = builder.interface("Box", {"value": t}, type_parameters=[t])

        boxed = builder.instantiate(box, builder.string)

        prop = boxed.properties[0]
        assert prop.target is box.properties[0]
        assert builder.checker.get_type_of_symbol_at_location(prop, prop.declarations[0]) is (
            builder.string
        )

    def test_instantiation_fills_defaults(self, builder: ProgramBuilder) -> None:
        """Omitted trailing type arguments take their declared defaults."""
        t = builder.type_parameter("T")
        u = builder.type_parameter("U", default=builder.string)
        pair = builder.interface("Pair", type_parameters=[t, u])

        ref = builder.instantiate(pair, builder.number)

        assert ref.type_arguments == [builder.number, builder.string]

    def test_alias_attaches_to_structural_types_only(self, builder: ProgramBuilder) -> None:
        """Aliasing a primitive leaves the shared intrinsic untouched."""
        union = builder.alias("Id", builder.union(builder.string, builder.number))
        builder.alias("Text", builder.string)

        assert union.alias_symbol is not None
        assert builder.string.alias_symbol is None

    def test_enum_members(self, builder: ProgramBuilder) -> None:
        """Enum members become enum literal types with their values."""
        color = builder.enum("Color", {"Red": "r", "Green": "g"})

        assert color.flags & TypeFlags.ENUM_LITERAL
        assert [m.value for m in color.types] == ["r", "g"]
        assert all(m.flags & TypeFlags.STRING_LITERAL for m in color.types)

    def test_class_statics_and_constructor(self, builder: ProgramBuilder) -> None:
        """Statics live on the class exports, constructors on its members."""
        point = builder.class_(
            "Point",
            {"x": builder.number},
            statics={"origin": builder.number},
            constructors=[[builder.param("x", builder.number)]],
        )

        symbol = point.symbol
        assert symbol is not None
        assert [s.name for s in symbol.exports] == ["prototype", "origin"]
        assert symbol.exports[0].flags & SymbolFlags.PROTOTYPE
        assert "__constructor" in symbol.members

    def test_default_export_of_identifier(self, builder: ProgramBuilder) -> None:
        """export default Name points its expression at the named symbol."""
        node = builder.interface("Node")

        default = builder.default_export(node.symbol)  # type: ignore[arg-type]

        expression = default.declarations[0].expression
        assert expression is not None
        assert expression.symbol is node.symbol
        assert builder.module.exports[-1] is default


class TestTypeNode:
    """Tests for declaration syntax produced by the builder."""

    def test_named_type_gets_reference_node(self, builder: ProgramBuilder) -> None:
        """Named interfaces are written as type references."""
        node = builder.interface("Node")

        assert builder.type_node(node).kind is NodeKind.TYPE_REFERENCE

    def test_union_gets_union_node(self, builder: ProgramBuilder) -> None:
        """Anonymous unions are written member by member."""
        type_node = builder.type_node(builder.union(builder.string, builder.null))

        assert type_node.kind is NodeKind.UNION_TYPE
        assert len(type_node.types) == 2

    def test_boolean_is_not_a_union_node(self, builder: ProgramBuilder) -> None:
        """boolean is written as a plain type node."""
        assert builder.type_node(builder.boolean).kind is NodeKind.TYPE_NODE

    def test_keyof_gets_operator_node(self, builder: ProgramBuilder) -> None:
        """keyof X is written with an operand node."""
        node = builder.interface("Node")

        type_node = builder.type_node(builder.keyof(node))

        assert type_node.kind is NodeKind.KEYOF_OPERATOR
        assert type_node.type is not None
        assert builder.checker.get_type_at_location(type_node.type) is node
