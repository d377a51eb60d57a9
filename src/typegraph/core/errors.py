"""TypeGraph error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Extraction
- 4xxx: Oracle
- 9xxx: Internal
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_MISSING_REQUIRED = 2003
    CONFIG_FILE_NOT_FOUND = 2004

    # Extraction (3xxx)
    EXTRACT_MISSING_DECLARATION = 3001
    EXTRACT_MISSING_SIGNATURE = 3002
    EXTRACT_DANGLING_REFS = 3003

    # Oracle (4xxx)
    ORACLE_QUERY_FAILED = 4001
    ORACLE_UNKNOWN_NODE = 4002

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class TypeGraphError(Exception):
    """Base error with structured context for CLI and JSON output."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON responses."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(TypeGraphError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def missing_required(cls, field: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_MISSING_REQUIRED,
            message=f"Missing required config field: {field}",
            details={"field": field},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class ExtractionError(TypeGraphError):
    """Defects in the input program that make a model impossible to build."""

    @classmethod
    def missing_declaration(cls, name: str, what: str) -> "ExtractionError":
        return cls(
            code=ErrorCode.EXTRACT_MISSING_DECLARATION,
            message=f"'{name}' has no {what}",
            details={"name": name, "missing": what},
        )

    @classmethod
    def missing_signature(cls, name: str) -> "ExtractionError":
        return cls(
            code=ErrorCode.EXTRACT_MISSING_SIGNATURE,
            message=f"Function '{name}' has no call signature",
            details={"name": name},
        )

    @classmethod
    def dangling_refs(cls, names: list[str]) -> "ExtractionError":
        return cls(
            code=ErrorCode.EXTRACT_DANGLING_REFS,
            message=f"Unresolved references: {', '.join(names)}",
            details={"names": names},
        )


class OracleError(TypeGraphError):
    """The type-checking oracle could not answer a query."""

    @classmethod
    def query_failed(cls, query: str, reason: str) -> "OracleError":
        return cls(
            code=ErrorCode.ORACLE_QUERY_FAILED,
            message=f"Oracle query '{query}' failed: {reason}",
            details={"query": query, "reason": reason},
        )

    @classmethod
    def unknown_node(cls, query: str, node: str) -> "OracleError":
        return cls(
            code=ErrorCode.ORACLE_UNKNOWN_NODE,
            message=f"Oracle query '{query}' cannot resolve {node}",
            details={"query": query, "node": node},
        )


class InternalError(TypeGraphError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
