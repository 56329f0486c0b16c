"""Core record validation framework.

Records declare per-attribute rules with ``Record.validates``; running
``record.validate()`` clears the record's error collection and lets every
rule add errors to it.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, ClassVar

logger = logging.getLogger(__name__)

DEFAULT_MESSAGES = {
    "invalid": "is invalid",
    "invalid_json": "is invalid JSON",
}


def humanize(attribute: str) -> str:
    """``profile_data`` -> ``Profile data``."""
    text = attribute.replace("_", " ").strip()
    return text[:1].upper() + text[1:]


@dataclass
class RecordError:
    """A single error recorded on a record attribute."""
    attribute: str
    type: str
    context: dict[str, Any] = field(default_factory=dict)

    @property
    def message(self) -> str:
        return DEFAULT_MESSAGES.get(self.type, self.type)

    @property
    def full_message(self) -> str:
        return f"{humanize(self.attribute)} {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "attribute": self.attribute,
            "type": self.type,
            "message": self.full_message,
            "context": self.context,
        }

    def __str__(self) -> str:
        detail = self.context.get("error")
        if detail:
            return f"{self.full_message} ({detail})"
        return self.full_message


class Errors:
    """Error collection of one record, grouped by attribute."""

    def __init__(self) -> None:
        self._errors: list[RecordError] = []

    def add(self, attribute: str, message: str = "invalid", **context: Any) -> RecordError:
        """Add an error for an attribute.

        Args:
            attribute: Attribute the error belongs to
            message: Message key (see DEFAULT_MESSAGES) or literal message
            **context: Structured details kept with the error
        """
        error = RecordError(attribute, message, dict(context))
        self._errors.append(error)
        return error

    def where(self, attribute: str) -> list[RecordError]:
        return [error for error in self._errors if error.attribute == attribute]

    def __getitem__(self, attribute: str) -> list[str]:
        return [error.message for error in self.where(attribute)]

    def __contains__(self, attribute: object) -> bool:
        return any(error.attribute == attribute for error in self._errors)

    def __iter__(self) -> Iterator[RecordError]:
        return iter(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    @property
    def attribute_names(self) -> list[str]:
        return list(dict.fromkeys(error.attribute for error in self._errors))

    @property
    def details(self) -> dict[str, list[dict[str, Any]]]:
        details: dict[str, list[dict[str, Any]]] = {}
        for error in self._errors:
            details.setdefault(error.attribute, []).append({"type": error.type, **error.context})
        return details

    @property
    def full_messages(self) -> list[str]:
        return [error.full_message for error in self._errors]

    def clear(self) -> None:
        self._errors.clear()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "count": len(self._errors),
            "errors": [error.to_dict() for error in self._errors],
        }


class EachValidator(ABC):
    """Base class for rules that validate attributes one at a time."""

    def __init__(self, owner: type, attributes: list[str], allow_none: bool = False):
        self.owner = owner
        self.attributes = list(attributes)
        self.allow_none = allow_none

    def validate(self, record: "Record") -> None:
        for attribute in self.attributes:
            value = getattr(record, attribute, None)
            if value is None and self.allow_none:
                continue
            self.validate_each(record, attribute, value)

    @abstractmethod
    def validate_each(self, record: "Record", attribute: str, value: Any) -> None:
        """Validate one attribute value, adding errors to ``record.errors``."""
        pass


VALIDATORS: dict[str, type[EachValidator]] = {}


def register_validator(key: str, validator_cls: type[EachValidator]) -> None:
    """Make a rule available as ``Record.validates(..., <key>={...})``."""
    VALIDATORS[key] = validator_cls


class Record:
    """Base class for records carrying validated attributes."""

    _own_validators: ClassVar[list[EachValidator]] = []

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        # Each class keeps only the rules registered on it
        cls._own_validators = []

    def __init__(self, **attributes: Any) -> None:
        for name, value in attributes.items():
            setattr(self, name, value)

    @property
    def errors(self) -> Errors:
        errors = self.__dict__.get("_errors")
        if errors is None:
            errors = self.__dict__["_errors"] = Errors()
        return errors

    @classmethod
    def validates(cls, *attributes: str, **rules: Any) -> list[EachValidator]:
        """Attach rules to attributes of this record type.

        Each keyword names a registered rule; its value is the rule's options::

            Profile.validates("data", json={"schema": PROFILE_SCHEMA})
        """
        if not attributes:
            raise ValueError("validates requires at least one attribute")

        added = []
        for key, options in rules.items():
            validator_cls = VALIDATORS.get(key)
            if validator_cls is None:
                raise ValueError(f"Unknown validator: {key}. Must be one of: {', '.join(sorted(VALIDATORS))}")
            if options is True:
                options = {}
            added.append(cls.validates_with(validator_cls, *attributes, **dict(options)))
        return added

    @classmethod
    def validators(cls) -> list[EachValidator]:
        """Rules of this record type and its parents, parents first.

        Collected on every call, so rules added to a parent after a subclass
        was defined still apply to the subclass.
        """
        return [
            validator
            for klass in reversed(cls.__mro__)
            for validator in vars(klass).get("_own_validators", ())
        ]

    @classmethod
    def validates_with(cls, validator_cls: type[EachValidator], *attributes: str, **options: Any) -> EachValidator:
        validator = validator_cls(cls, list(attributes), **options)
        cls._own_validators.append(validator)
        logger.debug(f"Registered {validator_cls.__name__} on {cls.__name__} for {', '.join(attributes)}")
        return validator

    def validate(self) -> bool:
        """Run all rules. Returns True when no error was recorded."""
        self.errors.clear()
        for validator in self.validators():
            validator.validate(self)
        if self.errors:
            logger.debug(f"{type(self).__name__} has {len(self.errors)} errors")
        return not self.errors

    def is_valid(self) -> bool:
        return self.validate()


def validates(*attributes: str, **rules: Any):
    """Class decorator form of ``Record.validates``."""
    def decorator(cls):
        cls.validates(*attributes, **rules)
        return cls
    return decorator
