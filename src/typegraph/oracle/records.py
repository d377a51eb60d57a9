"""Records describing what the oracle knows about a program.

These mirror the oracle's own object graph: syntax nodes, symbols, resolved
types, signatures and index signatures. Every record compares by identity;
the extractor relies on "same object" to mean "same semantic entity".
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field

from typegraph.oracle.flags import HeritageToken, NodeKind, ObjectFlags, SymbolFlags, TypeFlags

_ids = itertools.count(1)


def next_id() -> int:
    return next(_ids)


@dataclass(eq=False, kw_only=True)
class HeritageClause:
    """An ``extends`` or ``implements`` list on an interface or class declaration."""

    token: HeritageToken
    types: list[Node] = field(default_factory=list)


@dataclass(eq=False, kw_only=True)
class Node:
    """A syntax node: declaration, type node or expression.

    Only the attributes relevant to ``kind`` are populated.
    """

    kind: NodeKind
    name: str | None = None
    symbol: OracleSymbol | None = None
    parent: Node | None = None
    file_name: str | None = None

    # Annotation, aliased type, template of a mapped type, operand of keyof
    type: Node | None = None
    # Members of a union type node
    types: list[Node] = field(default_factory=list)
    type_parameters: list[Node] = field(default_factory=list)
    # Key of a mapped type, variable of an infer type
    type_parameter: Node | None = None
    parameters: list[Node] = field(default_factory=list)
    constraint: Node | None = None
    default: Node | None = None
    initializer: Node | None = None
    expression: Node | None = None
    heritage_clauses: list[HeritageClause] = field(default_factory=list)
    dot_dot_dot: bool = False
    question: bool = False
    modifiers: list[str] = field(default_factory=list)

    def source_file_name(self) -> str | None:
        """File the node was declared in, found by walking up the parents."""
        node: Node | None = self
        while node is not None:
            if node.file_name is not None:
                return node.file_name
            node = node.parent
        return None

    def __repr__(self) -> str:
        return f"Node({self.kind.value}, {self.name!r})"


@dataclass(eq=False, kw_only=True)
class OracleSymbol:
    name: str
    flags: SymbolFlags = SymbolFlags.NONE
    id: int = field(default_factory=next_id)
    declarations: list[Node] = field(default_factory=list)
    value_declaration: Node | None = None
    documentation: list[str] = field(default_factory=list)
    # Declared member this symbol was instantiated from
    target: OracleSymbol | None = None
    members: dict[str, OracleSymbol] = field(default_factory=dict)
    exports: list[OracleSymbol] = field(default_factory=list)
    parent: OracleSymbol | None = None

    def __repr__(self) -> str:
        return f"OracleSymbol({self.name!r}, id={self.id})"


@dataclass(eq=False, kw_only=True)
class Signature:
    declaration: Node | None = None
    type_parameters: list[OracleType] = field(default_factory=list)
    parameters: list[OracleSymbol] = field(default_factory=list)
    return_type: OracleType


@dataclass(eq=False, kw_only=True)
class IndexInfo:
    key_type: OracleType
    type: OracleType
    declaration: Node | None = None


@dataclass(eq=False, kw_only=True)
class OracleType:
    """A fully resolved type.

    Payload attributes are populated according to ``flags``:
    literals carry ``value``, unions and intersections carry ``types``,
    references carry ``target`` and ``type_arguments``, and so on.
    """

    flags: TypeFlags
    id: int = field(default_factory=next_id)
    object_flags: ObjectFlags = ObjectFlags.NONE
    symbol: OracleSymbol | None = None
    alias_symbol: OracleSymbol | None = None
    alias_type_arguments: list[OracleType] | None = None

    # Generic references and tuples
    target: OracleType | None = None
    type_arguments: list[OracleType] | None = None
    type_parameters: list[OracleType] | None = None

    # Unions and intersections
    types: list[OracleType] = field(default_factory=list)

    # Literals and intrinsics
    value: str | int | float | None = None
    intrinsic_name: str | None = None

    # Object members
    properties: list[OracleSymbol] = field(default_factory=list)
    call_signatures: list[Signature] = field(default_factory=list)
    construct_signatures: list[Signature] = field(default_factory=list)
    string_index_info: IndexInfo | None = None
    number_index_info: IndexInfo | None = None

    # Type parameters
    constraint: OracleType | None = None

    # Conditional types
    check_type: OracleType | None = None
    extends_type: OracleType | None = None
    true_type: OracleType | None = None
    false_type: OracleType | None = None

    # Substitution types
    base_type: OracleType | None = None

    # keyof (index) types
    operand: OracleType | None = None

    # Indexed access types
    object_type: OracleType | None = None
    index_type: OracleType | None = None

    # Mapped types
    type_parameter: OracleType | None = None

    def __repr__(self) -> str:
        name = self.alias_symbol.name if self.alias_symbol else (
            self.symbol.name if self.symbol else self.intrinsic_name
        )
        return f"OracleType({self.flags!r}, {name!r}, id={self.id})"

