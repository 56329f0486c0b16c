"""Resolution of schema sources against a record.

A schema source is a literal schema, a callback taking the record, or a
``MethodRef`` naming a zero-argument method on the record. Callbacks and
methods may return another source, so resolution follows them until a
literal is reached.
"""

import logging
from dataclasses import dataclass
from typing import Any

from ..config import DEFAULT_MAX_SCHEMA_DEPTH
from ..exceptions import SchemaResolutionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MethodRef:
    """Reference to a zero-argument method on the record returning a schema source."""
    name: str

    def __str__(self) -> str:
        return f"{self.name}()"


def resolve_schema(record: Any, source: Any, *, max_depth: int = DEFAULT_MAX_SCHEMA_DEPTH) -> Any:
    """Resolve a schema source to a literal schema.

    Args:
        record: Record the callbacks and methods are evaluated against
        source: Literal schema, callable taking the record, or MethodRef
        max_depth: Maximum number of callback/method hops to follow

    Returns:
        The first source in the chain that is neither a callable nor a MethodRef

    Raises:
        SchemaResolutionError: If the chain is longer than max_depth or a
            MethodRef does not name a callable on the record
    """
    return _resolve(record, source, 0, max_depth)


def _resolve(record: Any, source: Any, depth: int, max_depth: int) -> Any:
    if isinstance(source, MethodRef):
        method = getattr(record, source.name, None)
        if not callable(method):
            raise SchemaResolutionError(
                f"{type(record).__name__} has no schema method {source.name!r}"
            )
        _check_depth(record, source, depth, max_depth)
        logger.debug(f"Resolving schema via method {source} on {type(record).__name__}")
        return _resolve(record, method(), depth + 1, max_depth)

    if callable(source):
        _check_depth(record, source, depth, max_depth)
        logger.debug(f"Resolving schema via callback {source!r}")
        return _resolve(record, source(record), depth + 1, max_depth)

    return source


def _check_depth(record: Any, source: Any, depth: int, max_depth: int) -> None:
    if depth >= max_depth:
        raise SchemaResolutionError(
            f"Schema source {source} on {type(record).__name__} did not resolve "
            f"within {max_depth} steps (cyclic schema reference?)"
        )
