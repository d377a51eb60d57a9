"""Tests for error types and codes."""

import pytest

from typegraph.core.errors import (
    ConfigError,
    ErrorCode,
    ExtractionError,
    InternalError,
    OracleError,
    TypeGraphError,
)


class TestErrorCode:
    """Error code value tests."""

    @pytest.mark.parametrize(
        ("code", "expected_range"),
        [
            (ErrorCode.CONFIG_PARSE_ERROR, 2000),
            (ErrorCode.CONFIG_INVALID_VALUE, 2000),
            (ErrorCode.EXTRACT_MISSING_DECLARATION, 3000),
            (ErrorCode.EXTRACT_DANGLING_REFS, 3000),
            (ErrorCode.ORACLE_QUERY_FAILED, 4000),
            (ErrorCode.ORACLE_UNKNOWN_NODE, 4000),
            (ErrorCode.INTERNAL_ERROR, 9000),
        ],
    )
    def test_given_error_code_when_checked_then_in_correct_range(
        self, code: ErrorCode, expected_range: int
    ) -> None:
        """Error codes fall within their designated numeric range."""
        # Given
        error_code = code

        # When
        value = error_code.value

        # Then
        assert expected_range <= value < expected_range + 1000


class TestTypeGraphError:
    """Base error behavior tests."""

    def test_given_error_when_to_dict_then_serializes_all_fields(self) -> None:
        """Error serializes to dict with all required fields."""
        # Given
        error = TypeGraphError(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message="Test message",
            retryable=True,
            details={"key": "value"},
        )

        # When
        result = error.to_dict()

        # Then
        assert result == {
            "code": 2001,
            "error": "CONFIG_PARSE_ERROR",
            "message": "Test message",
            "retryable": True,
            "details": {"key": "value"},
        }

    def test_given_error_when_str_then_human_readable(self) -> None:
        """Error string representation is human readable."""
        # Given
        error = TypeGraphError(code=ErrorCode.INTERNAL_ERROR, message="Something broke")

        # When
        result = str(error)

        # Then
        assert result == "[9001] INTERNAL_ERROR: Something broke"

    def test_subclasses_are_catchable_as_base(self) -> None:
        """Every domain error is a TypeGraphError."""
        with pytest.raises(TypeGraphError):
            raise ExtractionError.missing_signature("f")


class TestConfigError:
    """ConfigError factory method tests."""

    @pytest.mark.parametrize(
        ("factory", "kwargs", "expected_code"),
        [
            (
                "parse_error",
                {"path": "/foo", "reason": "bad yaml"},
                ErrorCode.CONFIG_PARSE_ERROR,
            ),
            (
                "invalid_value",
                {"field": "output.indent", "value": "x", "reason": "not an int"},
                ErrorCode.CONFIG_INVALID_VALUE,
            ),
            ("missing_required", {"field": "libraries"}, ErrorCode.CONFIG_MISSING_REQUIRED),
            ("file_not_found", {"path": "/missing"}, ErrorCode.CONFIG_FILE_NOT_FOUND),
        ],
    )
    def test_given_factory_when_called_then_correct_code(
        self, factory: str, kwargs: dict[str, object], expected_code: ErrorCode
    ) -> None:
        """Factory methods produce errors with correct error codes."""
        # Given
        factory_method = getattr(ConfigError, factory)

        # When
        error = factory_method(**kwargs)

        # Then
        assert error.code == expected_code

    def test_given_parse_error_when_created_then_path_in_details(self) -> None:
        """Parse error includes file path in details."""
        # Given
        path = "/config.yaml"
        reason = "invalid syntax"

        # When
        error = ConfigError.parse_error(path, reason)

        # Then
        assert error.details["path"] == path
        assert reason in error.message


class TestExtractionError:
    """ExtractionError factory tests."""

    def test_missing_declaration_names_what_is_missing(self) -> None:
        """Message names the declaration and the missing piece."""
        error = ExtractionError.missing_declaration("Point", "aliased type")

        assert error.code == ErrorCode.EXTRACT_MISSING_DECLARATION
        assert error.message == "'Point' has no aliased type"
        assert error.details == {"name": "Point", "missing": "aliased type"}

    def test_missing_signature(self) -> None:
        """Missing signature carries the function name."""
        error = ExtractionError.missing_signature("run")

        assert error.code == ErrorCode.EXTRACT_MISSING_SIGNATURE
        assert "run" in error.message

    def test_dangling_refs_lists_names(self) -> None:
        """Dangling refs message lists every unresolved name in order."""
        error = ExtractionError.dangling_refs(["Foo", "Bar"])

        assert error.message == "Unresolved references: Foo, Bar"
        assert error.details["names"] == ["Foo", "Bar"]


class TestOracleError:
    """OracleError factory tests."""

    def test_query_failed(self) -> None:
        """Query failures record the query and reason."""
        error = OracleError.query_failed("get_declared_type_of_symbol", "no type")

        assert error.code == ErrorCode.ORACLE_QUERY_FAILED
        assert error.details == {"query": "get_declared_type_of_symbol", "reason": "no type"}

    def test_unknown_node(self) -> None:
        """Unknown node errors record the query."""
        error = OracleError.unknown_node("get_type_at_location", "Node(kind=...)")

        assert error.code == ErrorCode.ORACLE_UNKNOWN_NODE
        assert "get_type_at_location" in error.message


class TestInternalError:
    """InternalError tests."""

    def test_given_unexpected_error_when_created_then_includes_extras(self) -> None:
        """Unexpected error captures arbitrary extra details."""
        # Given
        message = "boom"
        extras = {"foo": "bar", "count": 42}

        # When
        error = InternalError.unexpected(message, **extras)

        # Then
        assert error.details == extras
        assert error.code == ErrorCode.INTERNAL_ERROR
