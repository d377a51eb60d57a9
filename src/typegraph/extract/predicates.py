"""Flag and syntax tests over oracle records, plus small symbol helpers."""

from __future__ import annotations

from typegraph.config.constants import CONSTRUCTOR_MEMBER_NAME, DEFAULT_INDEX_KEY_NAME
from typegraph.oracle.flags import NodeKind, ObjectFlags, SymbolFlags, TypeFlags
from typegraph.oracle.protocol import TypeChecker
from typegraph.oracle.records import IndexInfo, Node, OracleSymbol, OracleType

_METHOD_KINDS = frozenset({NodeKind.METHOD_SIGNATURE, NodeKind.METHOD_DECLARATION})
_NAMED_CONTAINER_KINDS = frozenset({NodeKind.INTERFACE, NodeKind.CLASS, NodeKind.TYPE_ALIAS})
_HIDDEN_ANONYMOUS_KINDS = frozenset({NodeKind.CONSTRUCTOR_TYPE, NodeKind.FUNCTION_TYPE})


# -- types ----------------------------------------------------------------


def is_object(type: OracleType) -> bool:
    return bool(type.flags & TypeFlags.OBJECT)


def is_reference(type: OracleType) -> bool:
    return is_object(type) and bool(type.object_flags & ObjectFlags.REFERENCE)


def is_tuple(type: OracleType) -> bool:
    return (
        is_reference(type)
        and type.target is not None
        and bool(type.target.object_flags & ObjectFlags.TUPLE)
    )


def is_anonymous_object(type: OracleType) -> bool:
    return is_object(type) and bool(type.object_flags & ObjectFlags.ANONYMOUS)


def is_mapped(type: OracleType) -> bool:
    return is_object(type) and bool(type.object_flags & ObjectFlags.MAPPED)


def is_class(type: OracleType) -> bool:
    return is_object(type) and bool(type.object_flags & ObjectFlags.CLASS)


def is_type_parameter(type: OracleType) -> bool:
    return bool(type.flags & TypeFlags.TYPE_PARAMETER)


def is_keyof(type: OracleType) -> bool:
    return bool(type.flags & TypeFlags.INDEX) and type.operand is not None


def is_union(type: OracleType) -> bool:
    return bool(type.flags & TypeFlags.UNION)


def is_intersection(type: OracleType) -> bool:
    return bool(type.flags & TypeFlags.INTERSECTION)


def is_indexed_access(type: OracleType) -> bool:
    return bool(type.flags & TypeFlags.INDEXED_ACCESS)


# -- syntax ---------------------------------------------------------------


def is_keyof_node(node: Node | None) -> bool:
    return node is not None and node.kind is NodeKind.KEYOF_OPERATOR


def is_union_node(node: Node | None) -> bool:
    return node is not None and node.kind is NodeKind.UNION_TYPE


def is_type_reference_node(node: Node | None) -> bool:
    return node is not None and node.kind is NodeKind.TYPE_REFERENCE


def is_infer_node(node: Node | None) -> bool:
    return node is not None and node.kind is NodeKind.INFER_TYPE


def is_method(node: Node | None) -> bool:
    return node is not None and node.kind in _METHOD_KINDS


def is_named_container(node: Node | None) -> bool:
    return (
        node is not None
        and node.kind in _NAMED_CONTAINER_KINDS
        and node.symbol is not None
        and bool(node.symbol.name)
    )


def is_hidden_anonymous_declaration(node: Node | None) -> bool:
    return node is not None and node.kind in _HIDDEN_ANONYMOUS_KINDS


# -- symbols --------------------------------------------------------------


def first_declaration(symbol: OracleSymbol | None) -> Node | None:
    if symbol is None or not symbol.declarations:
        return None
    return symbol.declarations[0]


def declaration_file(type: OracleType) -> str | None:
    decl = first_declaration(type.symbol)
    return decl.source_file_name() if decl is not None else None


def prop_identity(symbol: OracleSymbol) -> int:
    """Id of the declared member an (instantiated) property comes from."""
    while symbol.target is not None:
        symbol = symbol.target
    return symbol.id


def get_comment(checker: TypeChecker, symbol: OracleSymbol | None) -> str | None:
    if symbol is None:
        return None
    parts = checker.get_documentation_comment(symbol)
    return "\n".join(parts) if parts else None


def get_modifiers(symbol: OracleSymbol) -> str:
    decl = first_declaration(symbol)
    return " ".join(decl.modifiers) if decl is not None else ""


def get_key_name(info: IndexInfo | None) -> str:
    decl = info.declaration if info is not None else None
    if decl is not None and decl.parameters and decl.parameters[0].name:
        return decl.parameters[0].name
    return DEFAULT_INDEX_KEY_NAME


def get_constructors(type: OracleType) -> list[Node]:
    symbol = type.symbol
    if symbol is None or CONSTRUCTOR_MEMBER_NAME not in symbol.members:
        return []
    return list(symbol.members[CONSTRUCTOR_MEMBER_NAME].declarations)


def is_optional(symbol: OracleSymbol) -> bool:
    return bool(symbol.flags & SymbolFlags.OPTIONAL)


def is_prototype(symbol: OracleSymbol) -> bool:
    return bool(symbol.flags & SymbolFlags.PROTOTYPE)


def global_name(symbol: OracleSymbol) -> str:
    """Dotted path through enclosing namespaces, e.g. ``JSX.Element``."""
    names: list[str] = []
    current: OracleSymbol | None = symbol
    while current is not None and not current.flags & SymbolFlags.MODULE:
        names.append(current.name)
        current = current.parent
    return ".".join(reversed(names))
