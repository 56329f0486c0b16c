"""JSON Schema checking of attribute values."""

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError
from jsonschema.validators import validator_for

from ..exceptions import SchemaLoadError

logger = logging.getLogger(__name__)


class SchemaViolation:
    """Represents a single schema violation."""

    def __init__(self, path: str, message: str, schema_path: str = ""):
        self.path = path
        self.message = message
        self.schema_path = schema_path

    @classmethod
    def from_error(cls, error: ValidationError) -> "SchemaViolation":
        schema_path = "/".join(str(part) for part in error.absolute_schema_path)
        return cls(error.json_path, error.message, schema_path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SchemaViolation):
            return NotImplemented
        return (self.path, self.message, self.schema_path) == (other.path, other.message, other.schema_path)

    def __repr__(self) -> str:
        return f"SchemaViolation(path={self.path!r}, message={self.message!r})"

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


def pretty(violation: SchemaViolation) -> str:
    """Human-readable rendering of a violation."""
    return str(violation)


def load_schema(schema: Any) -> Mapping[str, Any] | bool:
    """Turn a resolved schema value into a schema document.

    Mappings and boolean schemas are used as they are, strings are decoded
    as JSON text and paths are read as JSON files.

    Raises:
        SchemaLoadError: If the value cannot be turned into a schema
    """
    if isinstance(schema, (Mapping, bool)):
        return schema

    if isinstance(schema, str):
        try:
            return json.loads(schema)
        except json.JSONDecodeError as e:
            raise SchemaLoadError(f"Invalid JSON in schema text: {e}") from e

    if isinstance(schema, os.PathLike):
        schema_path = Path(schema)
        try:
            with open(schema_path, encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise SchemaLoadError(f"Invalid JSON in schema file {schema_path}: {e}") from e
        except OSError as e:
            raise SchemaLoadError(f"Failed to read schema file {schema_path}: {e}") from e

    raise SchemaLoadError(f"Unsupported schema type: {type(schema).__name__}")


class SchemaChecker:
    """Checks JSON text against one schema document.

    Extra options are passed to the jsonschema validator class. The ``cls``
    option picks the validator class, otherwise it is chosen from the
    schema's ``$schema`` keyword with Draft 2020-12 as the fallback.
    """

    def __init__(self, schema: Any, **options: Any):
        self.schema = load_schema(schema)
        options = dict(options)
        validator_cls = options.pop("cls", None) or validator_for(self.schema, default=Draft202012Validator)
        self.validator = validator_cls(self.schema, **options)

    def validate(self, json_text: str, decode: bool = True) -> list[SchemaViolation]:
        """Validate a value against the schema.

        Args:
            json_text: JSON text of the value to check, or a plain string
                when decode is False
            decode: Decode json_text before checking; text that does not
                decode is still checked as a plain string

        Returns:
            List of violations (empty if valid)
        """
        instance = json_text
        if decode:
            try:
                instance = json.loads(json_text)
            except json.JSONDecodeError:
                pass

        violations = [SchemaViolation.from_error(e) for e in self.validator.iter_errors(instance)]
        logger.debug(f"Schema check found {len(violations)} violations")
        return violations


def check_schema(schema: Any) -> None:
    """Check a schema document against its metaschema.

    Raises:
        jsonschema.exceptions.SchemaError: If the schema is not a valid schema document
    """
    validator_for(schema, default=Draft202012Validator).check_schema(schema)
