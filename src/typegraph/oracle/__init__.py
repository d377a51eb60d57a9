"""Type-checking oracle contract and the in-memory implementation."""

from typegraph.oracle.flags import (
    HeritageToken,
    IndexKind,
    NodeKind,
    ObjectFlags,
    SymbolFlags,
    TypeFlags,
)
from typegraph.oracle.memory import InMemoryChecker, ProgramBuilder
from typegraph.oracle.protocol import OracleProgram, TypeChecker
from typegraph.oracle.records import (
    HeritageClause,
    IndexInfo,
    Node,
    OracleSymbol,
    OracleType,
    Signature,
)

__all__ = [
    "TypeChecker",
    "OracleProgram",
    "InMemoryChecker",
    "ProgramBuilder",
    "HeritageClause",
    "IndexInfo",
    "Node",
    "OracleSymbol",
    "OracleType",
    "Signature",
    "HeritageToken",
    "IndexKind",
    "NodeKind",
    "ObjectFlags",
    "SymbolFlags",
    "TypeFlags",
]
