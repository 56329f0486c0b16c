"""Unit tests for configuration models."""

import logging

import pytest

from recjson.config import (
    DEFAULT_MAX_SCHEMA_DEPTH,
    JsonValidatorOptions,
    LoggingConfig,
    LogLevel,
)


class TestJsonValidatorOptions:
    """Test JsonValidatorOptions model."""

    def test_minimal_options(self):
        """Test defaults for a minimal rule configuration."""
        schema = {"type": "object"}
        options = JsonValidatorOptions(attributes=["data"], schema=schema)

        assert options.attributes == ["data"]
        assert options.schema_source is schema
        assert options.message == "invalid_json"
        assert options.options == {}
        assert options.max_schema_depth == DEFAULT_MAX_SCHEMA_DEPTH
        assert options.allow_none is False

    def test_populate_by_field_name(self):
        options = JsonValidatorOptions(attributes=["data"], schema_source='{"type": "object"}')
        assert options.schema_source == '{"type": "object"}'

    def test_none_message_falls_back_to_default(self):
        options = JsonValidatorOptions(attributes=["data"], schema={}, message=None)
        assert options.message == "invalid_json"

    def test_custom_message(self):
        options = JsonValidatorOptions(attributes=["data"], schema={}, message="bad_profile")
        assert options.message == "bad_profile"

    def test_callable_schema_kept_as_is(self):
        def source(record):
            return {}

        options = JsonValidatorOptions(attributes=["data"], schema=source)
        assert options.schema_source is source

    def test_schema_required(self):
        with pytest.raises(ValueError):
            JsonValidatorOptions(attributes=["data"])

    def test_none_schema_rejected(self):
        with pytest.raises(ValueError, match="schema is required"):
            JsonValidatorOptions(attributes=["data"], schema=None)

    def test_attributes_required(self):
        with pytest.raises(ValueError):
            JsonValidatorOptions(attributes=[], schema={})

    def test_attribute_names_must_be_identifiers(self):
        with pytest.raises(ValueError, match="valid identifier"):
            JsonValidatorOptions(attributes=["not valid"], schema={})

    def test_extra_fields_forbidden(self):
        """Test that unknown options are rejected."""
        with pytest.raises(ValueError):
            JsonValidatorOptions(attributes=["data"], schema={}, strict=True)

    @pytest.mark.parametrize("depth", [0, 101])
    def test_max_schema_depth_bounds(self, depth):
        with pytest.raises(ValueError, match="max_schema_depth"):
            JsonValidatorOptions(attributes=["data"], schema={}, max_schema_depth=depth)

    def test_options_frozen(self):
        options = JsonValidatorOptions(attributes=["data"], schema={})
        with pytest.raises(ValueError):
            options.message = "other"


class TestLoggingConfig:
    """Test logging configuration."""

    def test_default_level(self):
        assert LoggingConfig().level == LogLevel.WARN

    def test_level_from_string(self):
        assert LoggingConfig(level="debug").level == LogLevel.DEBUG

    @pytest.mark.parametrize("level,expected", [
        (LogLevel.ERROR, logging.ERROR),
        (LogLevel.WARN, logging.WARNING),
        (LogLevel.INFO, logging.INFO),
        (LogLevel.DEBUG, logging.DEBUG),
        (LogLevel.TRACE, logging.NOTSET),
    ])
    def test_to_logging(self, level, expected):
        assert level.to_logging() == expected
