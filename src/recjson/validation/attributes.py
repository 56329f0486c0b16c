"""Assignment interception for JSON-validated attributes.

``install_json_attribute`` puts a ``JsonAttribute`` descriptor in front of an
attribute. Assigned strings are decoded as JSON before they reach the
original storage; strings that fail to decode are remembered in
``<attribute>_invalid_json`` and replaced by an empty object.
"""

import inspect
import json
import logging
from typing import Any

logger = logging.getLogger(__name__)

_MISSING = object()


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def invalid_json_attribute(attribute: str) -> str:
    """Name of the read accessor exposing the invalid JSON flag."""
    return f"{attribute}_invalid_json"


class JsonAttribute:
    """Data descriptor decoding JSON text on assignment.

    Reads and writes are delegated to ``original`` when the owner class
    already defined a data descriptor (a property with a setter, for
    instance); otherwise the value lives in the instance ``__dict__`` and
    ``default`` is returned until the first assignment.
    """

    def __init__(self, name: str, original: Any = None, default: Any = None):
        self.name = name
        self.original = original
        self.default = default
        self.flag_key = f"_{invalid_json_attribute(name)}"

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        if self.original is not None:
            return self.original.__get__(instance, owner)
        return instance.__dict__.get(self.name, self.default)

    def __set__(self, instance: Any, value: Any) -> None:
        instance.__dict__[self.flag_key] = None
        if isinstance(value, str):
            try:
                value = json.loads(value, parse_constant=_reject_constant)
            except ValueError as e:
                logger.debug(f"{type(instance).__name__}.{self.name} assigned invalid JSON: {e}")
                instance.__dict__[self.flag_key] = value
                value = {}
        self._store(instance, value)

    def _store(self, instance: Any, value: Any) -> None:
        if self.original is not None:
            self.original.__set__(instance, value)
        else:
            instance.__dict__[self.name] = value

    def invalid_json(self, instance: Any) -> str | None:
        """Raw input of the last assignment if it was not valid JSON."""
        return instance.__dict__.get(self.flag_key)


def install_json_attribute(owner: type, name: str) -> JsonAttribute:
    """Install JSON decoding on assignment to ``owner.<name>``.

    If the attribute is already JSON-decoded (on this class or a parent)
    the descriptor in place is returned.
    """
    existing = inspect.getattr_static(owner, name, _MISSING)
    if isinstance(existing, JsonAttribute):
        logger.debug(f"JSON attribute {owner.__name__}.{name} already installed")
        return existing

    original = None
    default = None
    if existing is not _MISSING:
        if hasattr(type(existing), "__set__"):
            original = existing
        else:
            default = existing

    descriptor = JsonAttribute(name, original=original, default=default)
    setattr(owner, name, descriptor)
    setattr(owner, invalid_json_attribute(name), property(descriptor.invalid_json))
    logger.debug(f"Installed JSON attribute on {owner.__name__}.{name}")
    return descriptor
