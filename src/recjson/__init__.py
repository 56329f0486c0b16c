"""recjson - JSON Schema validation for record attributes.

recjson attaches a JSON rule to record attributes: string assignments are
decoded as JSON, malformed input is remembered, and validation checks the
stored value against a JSON Schema, recording errors on the record.
"""

__version__ = "0.1.0"
__author__ = "rpapub"
__email__ = "contact@rpapub.dev"
__description__ = "JSON Schema validation for record attributes"

from recjson.exceptions import RecjsonError, SchemaLoadError, SchemaResolutionError
from recjson.schemas import MethodRef
from recjson.validation import (
    Errors,
    JsonValidator,
    Record,
    RecordError,
    validates,
)

__all__ = [
    "__version__",
    "__author__",
    "__email__",
    "__description__",
    "Errors",
    "JsonValidator",
    "MethodRef",
    "Record",
    "RecordError",
    "RecjsonError",
    "SchemaLoadError",
    "SchemaResolutionError",
    "validates",
]
