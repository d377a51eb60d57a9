"""The oracle contract consumed by the extractor.

The extractor never parses source. Everything it knows comes from these
synchronous queries; an adapter over a real compiler implements
``TypeChecker`` and hands the extractor an ``OracleProgram``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from typegraph.oracle.flags import IndexKind
from typegraph.oracle.records import IndexInfo, Node, OracleSymbol, OracleType, Signature


class TypeChecker(Protocol):
    """Queries answered by the type-checking oracle.

    Implementations raise ``OracleError`` when a location cannot be resolved.
    """

    def get_type_at_location(self, node: Node) -> OracleType: ...

    def get_type_from_type_node(self, node: Node) -> OracleType: ...

    def get_symbol_at_location(self, node: Node) -> OracleSymbol | None: ...

    def get_declared_type_of_symbol(self, symbol: OracleSymbol) -> OracleType: ...

    def get_type_of_symbol_at_location(self, symbol: OracleSymbol, node: Node) -> OracleType: ...

    def get_signature_from_declaration(self, node: Node) -> Signature: ...

    def get_exports_of_module(self, symbol: OracleSymbol) -> list[OracleSymbol]: ...

    def get_documentation_comment(self, symbol: OracleSymbol) -> list[str]: ...

    def get_properties_of_type(self, type: OracleType) -> list[OracleSymbol]: ...

    def get_call_signatures(self, type: OracleType) -> list[Signature]: ...

    def get_construct_signatures(self, type: OracleType) -> list[Signature]: ...

    def get_string_index_type(self, type: OracleType) -> OracleType | None: ...

    def get_number_index_type(self, type: OracleType) -> OracleType | None: ...

    def get_index_info_of_type(self, type: OracleType, kind: IndexKind) -> IndexInfo | None: ...

    def get_constraint_of_type_parameter(self, type: OracleType) -> OracleType | None: ...


@dataclass(eq=False, kw_only=True)
class OracleProgram:
    """A checker plus the module whose exports are extracted."""

    checker: TypeChecker
    module: OracleSymbol
