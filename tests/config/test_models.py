"""Tests for config/models.py module.

Covers:
- LogOutputConfig model
- LoggingConfig model
- ExtractionConfig model
- LibrariesConfig model
- OutputConfig model
- TypeGraphConfig root model
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from typegraph.config.models import (
    ExtractionConfig,
    LibrariesConfig,
    LoggingConfig,
    LogOutputConfig,
    OutputConfig,
    TypeGraphConfig,
)


class TestLogOutputConfig:
    """Tests for LogOutputConfig model."""

    def test_defaults(self) -> None:
        """Default values."""
        config = LogOutputConfig()
        assert config.format == "console"
        assert config.destination == "stderr"
        assert config.level is None

    def test_absolute_path_destination(self) -> None:
        """Absolute path is valid destination."""
        config = LogOutputConfig(destination="/var/log/typegraph.log")
        assert config.destination == "/var/log/typegraph.log"

    def test_relative_path_fails(self) -> None:
        """Relative path is rejected."""
        with pytest.raises(ValidationError, match="absolute path"):
            LogOutputConfig(destination="logs/app.log")


class TestLoggingConfig:
    """Tests for LoggingConfig model."""

    def test_defaults(self) -> None:
        """Default values."""
        config = LoggingConfig()
        assert config.level == "WARNING"
        assert len(config.outputs) == 1

    def test_invalid_level(self) -> None:
        """Invalid level is rejected."""
        with pytest.raises(ValidationError):
            LoggingConfig(level="TRACE")  # type: ignore[arg-type]


class TestExtractionConfig:
    """Tests for ExtractionConfig model."""

    def test_defaults(self) -> None:
        """Roots share one failure boundary and dangling refs only warn."""
        config = ExtractionConfig()
        assert config.isolate_roots is False
        assert config.strict_refs is False
        assert config.hidden_anonymous_max_hops == 3
        assert config.anonymous_prefix == "__"

    def test_zero_hops_allowed(self) -> None:
        """Zero disables hidden anonymous resolution."""
        assert ExtractionConfig(hidden_anonymous_max_hops=0).hidden_anonymous_max_hops == 0

    def test_negative_hops_rejected(self) -> None:
        """Negative hop counts are rejected."""
        with pytest.raises(ValidationError, match=">= 0"):
            ExtractionConfig(hidden_anonymous_max_hops=-1)


class TestLibrariesConfig:
    """Tests for LibrariesConfig model."""

    def test_defaults(self) -> None:
        """Ships with standard library and node globals patterns, no modules."""
        config = LibrariesConfig()
        assert "lib.*.d.ts" in config.base_lib_patterns
        assert config.global_patterns
        assert config.modules == {}

    def test_defaults_are_independent(self) -> None:
        """Each instance owns its pattern lists."""
        a = LibrariesConfig()
        b = LibrariesConfig()
        a.base_lib_patterns.append("custom")
        assert "custom" not in b.base_lib_patterns


class TestOutputConfig:
    """Tests for OutputConfig model."""

    def test_defaults(self) -> None:
        """Default values."""
        config = OutputConfig()
        assert config.indent == 2
        assert config.include_prop_ids is True

    def test_compact_output(self) -> None:
        """None indent means compact JSON."""
        assert OutputConfig(indent=None).indent is None


class TestTypeGraphConfig:
    """Tests for TypeGraphConfig root model."""

    def test_all_sections_present(self) -> None:
        """Root config exposes every section with defaults."""
        config = TypeGraphConfig()
        assert isinstance(config.logging, LoggingConfig)
        assert isinstance(config.extraction, ExtractionConfig)
        assert isinstance(config.libraries, LibrariesConfig)
        assert isinstance(config.output, OutputConfig)

    def test_validates_from_dict(self) -> None:
        """Nested dicts validate into section models."""
        config = TypeGraphConfig.model_validate(
            {"extraction": {"isolate_roots": True}, "output": {"indent": 4}}
        )
        assert config.extraction.isolate_roots is True
        assert config.output.indent == 4
