"""Config module exports."""

from typegraph.config.loader import TypeGraphSettings, load_config
from typegraph.config.models import (
    ExtractionConfig,
    LibrariesConfig,
    LoggingConfig,
    OutputConfig,
    TypeGraphConfig,
)

__all__ = [
    "load_config",
    "TypeGraphConfig",
    "TypeGraphSettings",
    "ExtractionConfig",
    "LibrariesConfig",
    "LoggingConfig",
    "OutputConfig",
]
