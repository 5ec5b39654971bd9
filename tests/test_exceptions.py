"""Tests for aws-autoconfig custom exceptions."""

import pytest

from aws_autoconfig import (
    AutoConfigError,
    AutoConfigurationError,
    ClientConstructionError,
    ServiceNotRegisteredError,
)


class TestExceptionHierarchy:
    """Test exception inheritance hierarchy."""

    def test_all_exceptions_inherit_from_base(self):
        """Test that all custom exceptions inherit from AutoConfigError."""
        assert issubclass(AutoConfigurationError, AutoConfigError)
        assert issubclass(ClientConstructionError, AutoConfigError)
        assert issubclass(ServiceNotRegisteredError, AutoConfigError)

    def test_base_inherits_from_exception(self):
        """Test that AutoConfigError inherits from built-in Exception."""
        assert issubclass(AutoConfigError, Exception)

    def test_can_catch_specific_error_with_base_class(self):
        """Test that specific errors can be caught with the base class."""
        with pytest.raises(AutoConfigError):
            raise ClientConstructionError("Failed to build client for 's3'")

    def test_error_message_is_preserved(self):
        """Test that error messages are preserved when raised."""
        with pytest.raises(ServiceNotRegisteredError, match="No client registered for 'kinesis'"):
            raise ServiceNotRegisteredError("No client registered for 'kinesis'")

    def test_not_caught_by_builtin_valueerror(self):
        """Test that aws-autoconfig errors don't get caught by built-in ValueError."""
        with pytest.raises(AutoConfigurationError):
            try:
                raise AutoConfigurationError("Client configuration not found")
            except ValueError:
                pytest.fail("AutoConfigurationError should not be caught by ValueError")
