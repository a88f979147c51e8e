"""Tests for error types and codes."""

import pytest

from clovergen.core.errors import (
    CloverGenError,
    ConfigError,
    ErrorCode,
    HitsLogError,
    InstrumentationError,
)


class TestErrorCode:
    """Error code value tests."""

    @pytest.mark.parametrize(
        ("code", "expected_range"),
        [
            (ErrorCode.CONFIG_PARSE_ERROR, 2000),
            (ErrorCode.CONFIG_INVALID_VALUE, 2000),
            (ErrorCode.INSTRUMENTATION_NOT_FOUND, 3000),
            (ErrorCode.INSTRUMENTATION_INVALID, 3000),
            (ErrorCode.HITS_LOG_MALFORMED, 4000),
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


class TestCloverGenError:
    """Base error behavior tests."""

    def test_given_error_when_to_dict_then_serializes_all_fields(self) -> None:
        """Error serializes to dict with all required fields."""
        # Given
        error = CloverGenError(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message="Test message",
            details={"key": "value"},
        )

        # When
        result = error.to_dict()

        # Then
        assert result == {
            "code": 2001,
            "error": "CONFIG_PARSE_ERROR",
            "message": "Test message",
            "details": {"key": "value"},
        }

    def test_given_error_when_str_then_human_readable(self) -> None:
        """Error string representation is human readable."""
        # Given
        error = CloverGenError(
            code=ErrorCode.HITS_LOG_MALFORMED,
            message="Something broke",
        )

        # When
        result = str(error)

        # Then
        assert result == "[4001] HITS_LOG_MALFORMED: Something broke"


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
                {"field": "report.threshold", "value": 150, "reason": "out of range"},
                ErrorCode.CONFIG_INVALID_VALUE,
            ),
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


class TestInstrumentationError:
    """InstrumentationError factory tests."""

    def test_given_missing_path_when_not_found_then_code_and_path(self) -> None:
        """Not-found error carries the path."""
        error = InstrumentationError.not_found("/repo/coverage.json")

        assert error.code == ErrorCode.INSTRUMENTATION_NOT_FOUND
        assert error.details == {"path": "/repo/coverage.json"}

    def test_given_reason_when_invalid_then_reason_in_message(self) -> None:
        """Invalid error includes the validation reason."""
        error = InstrumentationError.invalid("/x.json", "Assemblies.0.Name: Field required")

        assert error.code == ErrorCode.INSTRUMENTATION_INVALID
        assert "Field required" in error.message


class TestHitsLogError:
    """HitsLogError tests."""

    def test_given_bad_line_when_malformed_then_location_in_details(self) -> None:
        """Malformed error records path, line number and text."""
        # When
        error = HitsLogError.malformed("/tmp/hits.txt", 7, "abc")

        # Then
        assert error.code == ErrorCode.HITS_LOG_MALFORMED
        assert error.details == {"path": "/tmp/hits.txt", "line": 7, "text": "abc"}
        assert "line 7" in str(error)

    def test_given_malformed_error_then_is_value_error(self) -> None:
        """Callers catching ValueError also catch malformed hits logs."""
        error = HitsLogError.malformed("h", 1, "x")

        assert isinstance(error, ValueError)
        assert isinstance(error, CloverGenError)
