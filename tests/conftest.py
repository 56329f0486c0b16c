"""Shared fixtures for recjson tests."""

import pytest

from recjson.validation import Record


@pytest.fixture
def integer_schema():
    return {"type": "integer"}


@pytest.fixture
def profile_schema():
    """Schema for a small profile object."""
    return {
        "type": "object",
        "properties": {
            "name": {"type": "string"},
            "age": {"type": "integer", "minimum": 0},
        },
        "required": ["name"],
    }


@pytest.fixture
def make_record_type():
    """Build a fresh record type with JSON rules on the given attributes."""
    def factory(*attributes, name="Profile", **json_options):
        record_type = type(name, (Record,), {})
        record_type.validates(*(attributes or ("data",)), json=json_options)
        return record_type
    return factory
