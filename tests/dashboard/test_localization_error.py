"""Tests for localization exceptions."""

import pytest

from dashboard.localization.localization_error import (
    LocalizationError,
    ResolutionExhaustedError,
    ResourceCatalogError
)


class TestResolutionExhaustedError:
    """Test ResolutionExhaustedError."""

    def test_message_with_control(self):
        """Test the message names the key and the starting control."""
        error = ResolutionExhaustedError("greeting", "messageSaved")

        assert error.key == "greeting"
        assert error.control_name == "messageSaved"
        assert str(error) == "No local resource file found for key 'greeting' from 'messageSaved'"

    def test_message_without_control(self):
        """Test the message for an unnamed control."""
        error = ResolutionExhaustedError("greeting")
        assert str(error) == "No local resource file found for key 'greeting'"

    def test_inherits_from_localization_error(self):
        """Test the exception hierarchy."""
        with pytest.raises(LocalizationError):
            raise ResolutionExhaustedError("k")


class TestResourceCatalogError:
    """Test ResourceCatalogError."""

    def test_carries_resource_file(self):
        """Test that the offending file is recorded."""
        error = ResourceCatalogError("Invalid JSON", "/r/Module.json")

        assert str(error) == "Invalid JSON"
        assert error.resource_file == "/r/Module.json"
        assert isinstance(error, LocalizationError)
