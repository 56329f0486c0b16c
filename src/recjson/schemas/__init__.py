"""Schema resolution and JSON Schema checking for recjson."""

from .source import MethodRef, resolve_schema
from .validator import SchemaChecker, SchemaViolation, check_schema, load_schema, pretty

__all__ = [
    "MethodRef",
    "SchemaChecker",
    "SchemaViolation",
    "check_schema",
    "load_schema",
    "pretty",
    "resolve_schema",
]
