"""Tests for the error classification hierarchy."""

import pytest

from yap_app.errors import (
    ConfigurationError,
    DataQualityError,
    MalformedDataError,
    PersistenceError,
    SystemFailureError,
)


class TestErrorHierarchy:
    """Test error classes and their context."""

    def test_persistence_error(self):
        error = PersistenceError("disk full", operation="write", target="/tmp/.yap",
                                 context={"errno": 28})

        assert isinstance(error, SystemFailureError)
        assert str(error) == "disk full"
        assert error.operation == "write"
        assert error.target == "/tmp/.yap"
        assert error.context == {"errno": 28}
        assert error.recoverable is False

    def test_configuration_error(self):
        error = ConfigurationError("bad", source="config.yaml", errors=["x"])

        assert isinstance(error, SystemFailureError)
        assert error.source == "config.yaml"
        assert error.errors == ["x"]

    def test_malformed_data_error(self):
        error = MalformedDataError("not json", raw_data="{", expected_format="object")

        assert isinstance(error, DataQualityError)
        assert error.raw_data == "{"
        assert error.expected_format == "object"
        assert error.context == {}
        assert error.recoverable is False

    @pytest.mark.parametrize("error_class", [PersistenceError, ConfigurationError, MalformedDataError])
    def test_defaults(self, error_class):
        error = error_class("message")

        assert error.context == {}
