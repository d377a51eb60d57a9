"""Core module exports."""

from typegraph.core.errors import (
    ConfigError,
    ErrorCode,
    ExtractionError,
    InternalError,
    OracleError,
    TypeGraphError,
)
from typegraph.core.logging import (
    bind_run_id,
    clear_run_id,
    configure_logging,
    get_run_id,
    reset_run_id,
    set_run_id,
)
from typegraph.core.progress import get_console, status

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "ExtractionError",
    "InternalError",
    "OracleError",
    "TypeGraphError",
    # Logging
    "bind_run_id",
    "clear_run_id",
    "configure_logging",
    "get_run_id",
    "reset_run_id",
    "set_run_id",
    # Progress
    "get_console",
    "status",
]
