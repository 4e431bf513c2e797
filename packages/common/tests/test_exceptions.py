"""Tests for the exception framework."""

import pytest

from stepform_common.exceptions import (
    ConfigurationError,
    SerializationError,
    StepformError,
    ValidationError,
)


class TestStepformError:
    """Test the base StepformError class."""

    def test_basic_exception(self):
        """Test basic exception without context."""
        error = StepformError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.context == {}
        assert error.details == {}

    def test_exception_with_context(self):
        """Test exception with context dictionary."""
        error = StepformError(
            "Step failed",
            context={"step": "info", "field": "email"}
        )
        assert str(error) == "Step failed"
        assert error.context == {"step": "info", "field": "email"}
        assert error.details is error.context

    def test_exception_with_details(self):
        """Test exception with details dictionary."""
        error = StepformError("Validator crashed", details={"error_type": "TypeError"})
        assert error.context == {"error_type": "TypeError"}

    def test_details_takes_precedence(self):
        """Test that details parameter takes precedence over context."""
        error = StepformError(
            "Error",
            context={"key": "context_value"},
            details={"key": "details_value"}
        )
        assert error.context == {"key": "details_value"}

    def test_exception_catchable_as_base(self):
        """Test that specific exceptions can be caught as base."""
        with pytest.raises(StepformError):
            raise ConfigurationError("Wizard must have at least one step")


class TestSubclasses:
    """Test the specific exception types."""

    @pytest.mark.parametrize(
        "exc_type", [ValidationError, ConfigurationError, SerializationError]
    )
    def test_inherits_base(self, exc_type):
        error = exc_type("failed", context={"field": "email"})
        assert isinstance(error, StepformError)
        assert error.context == {"field": "email"}

    def test_configuration_error_with_context(self):
        """Test configuration error listing alternatives."""
        error = ConfigurationError(
            "Unknown validator kind",
            context={"kind": "phone", "available": ["email", "min_length"]}
        )
        assert error.context["kind"] == "phone"
        assert "available" in error.context

    def test_chained_cause(self):
        """Test that the original exception is preserved as __cause__."""
        try:
            try:
                raise KeyError("email")
            except KeyError as e:
                raise ValidationError("Validator crashed") from e
        except ValidationError as error:
            assert isinstance(error.__cause__, KeyError)
