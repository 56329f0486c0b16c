"""Record validation layer for recjson.

Provides the record base class, its error collection and the JSON rule.
"""

from .attributes import JsonAttribute, install_json_attribute
from .framework import (
    VALIDATORS,
    EachValidator,
    Errors,
    Record,
    RecordError,
    register_validator,
    validates,
)
from .json_validator import JsonValidator

__all__ = [
    "VALIDATORS",
    "EachValidator",
    "Errors",
    "JsonAttribute",
    "JsonValidator",
    "Record",
    "RecordError",
    "install_json_attribute",
    "register_validator",
    "validates",
]
