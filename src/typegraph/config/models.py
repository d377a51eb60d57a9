"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (TYPEGRAPH__SECTION__KEY)
3. Project YAML (.typegraph/config.yaml)
4. Global YAML (~/.config/typegraph/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    TYPEGRAPH__<SECTION>__<KEY>=<VALUE>

Examples:
    TYPEGRAPH__LOGGING__LEVEL=DEBUG
    TYPEGRAPH__EXTRACTION__STRICT_REFS=true
    TYPEGRAPH__OUTPUT__INDENT=4
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from typegraph.config.constants import (
    ANONYMOUS_NAME_PREFIX,
    DEFAULT_BASE_LIB_PATTERNS,
    DEFAULT_GLOBAL_PATTERNS,
    HIDDEN_ANONYMOUS_MAX_HOPS,
)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        TYPEGRAPH__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. Stdout carries the graph JSON, so the default "
        "only reports failures and dangling references. DEBUG logs every registered "
        "reference.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class ExtractionConfig(BaseModel):
    """Extraction engine behavior.

    Env vars:
        TYPEGRAPH__EXTRACTION__ISOLATE_ROOTS: Keep going when one export fails
        TYPEGRAPH__EXTRACTION__STRICT_REFS: Fail the run on dangling references
        TYPEGRAPH__EXTRACTION__HIDDEN_ANONYMOUS_MAX_HOPS: Parent hops for hidden types
    """

    isolate_roots: bool = Field(
        default=False,
        description="Extract each exported declaration inside its own failure boundary. "
        "Failed roots are reported; the rest of the graph is kept.",
    )
    strict_refs: bool = Field(
        default=False,
        description="Raise when a reference does not resolve to a registry entry "
        "once extraction completes. Otherwise dangling names are logged.",
    )
    hidden_anonymous_max_hops: int = Field(
        default=HIDDEN_ANONYMOUS_MAX_HOPS,
        description="Declaration parents walked when looking for the named container "
        "of an anonymous library type.",
    )
    anonymous_prefix: str = Field(
        default=ANONYMOUS_NAME_PREFIX,
        description="Symbol name prefix the oracle uses for synthesized anonymous symbols.",
    )

    @field_validator("hidden_anonymous_max_hops")
    @classmethod
    def validate_hops(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"hidden_anonymous_max_hops must be >= 0, got {v}")
        return v


class LibrariesConfig(BaseModel):
    """Source file classification for external type references.

    Patterns are fnmatch globs matched against the oracle's file names.
    """

    base_lib_patterns: list[str] = Field(
        default_factory=lambda: list(DEFAULT_BASE_LIB_PATTERNS),
        description="Files of the standard library. Types declared here are "
        "referenced by their bare name.",
    )
    global_patterns: list[str] = Field(
        default_factory=lambda: list(DEFAULT_GLOBAL_PATTERNS),
        description="Files contributing ambient global declarations.",
    )
    modules: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Importable module name -> file patterns belonging to it.",
    )


class OutputConfig(BaseModel):
    """Serialized graph formatting.

    Env vars:
        TYPEGRAPH__OUTPUT__INDENT: JSON indent (null for compact)
        TYPEGRAPH__OUTPUT__INCLUDE_PROP_IDS: Keep oracle member ids on props
    """

    indent: int | None = Field(
        default=2,
        description="JSON indentation. None writes compact output.",
    )
    include_prop_ids: bool = Field(
        default=True,
        description="Serialize oracle-assigned property identity ids.",
    )


class TypeGraphConfig(BaseModel):
    """Root configuration for TypeGraph.

    All settings can be configured via:
    1. Environment variables: TYPEGRAPH__SECTION__KEY
    2. YAML config files (project or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    libraries: LibrariesConfig = Field(default_factory=LibrariesConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
