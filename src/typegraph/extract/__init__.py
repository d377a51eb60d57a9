"""Type-model extraction engine."""

from typegraph.extract.context import ExtractionContext, ExtractionStats
from typegraph.extract.dispatch import include_type
from typegraph.extract.entry import (
    include_default_export,
    include_exported_function,
    include_exported_type,
    include_exported_type_alias,
    include_exported_variable,
)
from typegraph.extract.naming import (
    ImportResolver,
    ModuleResolver,
    SourceOrigin,
    SourceScope,
)
from typegraph.extract.ops import (
    ExtractionResult,
    RootFailure,
    RootKind,
    extract_module,
    extract_root,
)
from typegraph.extract.registry import RefRegistry

__all__ = [
    "extract_module",
    "extract_root",
    "ExtractionResult",
    "ExtractionStats",
    "ExtractionContext",
    "RootFailure",
    "RootKind",
    "RefRegistry",
    "ImportResolver",
    "ModuleResolver",
    "SourceOrigin",
    "SourceScope",
    "include_type",
    "include_default_export",
    "include_exported_function",
    "include_exported_type",
    "include_exported_type_alias",
    "include_exported_variable",
]
