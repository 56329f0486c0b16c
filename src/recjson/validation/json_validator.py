"""JSON rule: decode assigned JSON text and check values against a JSON Schema."""

import json
import logging
from typing import Any

from ..config import JsonValidatorOptions
from ..schemas import SchemaChecker, pretty, resolve_schema
from .attributes import install_json_attribute, invalid_json_attribute
from .framework import EachValidator, Record, register_validator

logger = logging.getLogger(__name__)


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class JsonValidator(EachValidator):
    """Validate attributes against a JSON Schema.

    Construction installs JSON decoding on every governed attribute of the
    owner class, so ``record.data = '{"a": 1}'`` stores ``{"a": 1}`` and
    malformed text is remembered in ``record.data_invalid_json``.

    Options are described by ``JsonValidatorOptions``::

        Profile.validates("data", json={"schema": PROFILE_SCHEMA})
        Profile.validates("data", json={"schema": MethodRef("data_schema")})
        Profile.validates("data", json={"schema": lambda record: record.schema_for_kind()})
    """

    def __init__(self, owner: type, attributes: list[str], **options: Any):
        self.config = JsonValidatorOptions(attributes=attributes, **options)
        super().__init__(owner, self.config.attributes, allow_none=self.config.allow_none)

        for attribute in self.attributes:
            install_json_attribute(owner, attribute)

    @property
    def message(self) -> str:
        return self.config.message

    @property
    def options(self) -> dict[str, Any]:
        return self.config.options

    def validate_each(self, record: Record, attribute: str, value: Any) -> None:
        checker = SchemaChecker(self.schema(record), **self.options)
        # Stored strings are checked as they are, everything else as encoded JSON
        violations = checker.validate(self.validatable_value(value), decode=not isinstance(value, str))
        errors = [pretty(violation) for violation in violations]

        # Valid only when there are no violations and the last assignment decoded
        if not errors and is_blank(getattr(record, invalid_json_attribute(attribute), None)):
            return

        logger.debug(f"{type(record).__name__}.{attribute} failed JSON validation with {len(errors)} errors")
        for error in errors:
            record.errors.add(attribute, self.message, error=error)

    def schema(self, record: Record, source: Any = None) -> Any:
        """Resolve the configured schema source against a record."""
        if source is None:
            source = self.config.schema_source
        return resolve_schema(record, source, max_depth=self.config.max_schema_depth)

    @staticmethod
    def validatable_value(value: Any) -> str:
        if isinstance(value, str):
            return value
        return json.dumps(value, default=str)


register_validator("json", JsonValidator)
