"""Exceptions raised by recjson."""


class RecjsonError(Exception):
    """Base class for recjson errors."""


class SchemaLoadError(RecjsonError):
    """A resolved schema value could not be turned into a schema document."""


class SchemaResolutionError(RecjsonError):
    """A schema source could not be resolved to a concrete schema."""
