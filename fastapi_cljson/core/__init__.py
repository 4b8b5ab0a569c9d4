"""Core Collection+JSON resource and error helpers."""

from .errors import (
    ChildValidationError,
    CollectionErrorBuilder,
    CollectionJSONError,
    MarshalError,
    MissingFieldError,
    ParseError,
    SerializationError,
    ValidationError,
    WrongTypeError,
    WrongVersionError,
)
from .resource import CONTENT_TYPE, Resource, new

__all__ = [
    "CONTENT_TYPE",
    "ChildValidationError",
    "CollectionErrorBuilder",
    "CollectionJSONError",
    "MarshalError",
    "MissingFieldError",
    "ParseError",
    "Resource",
    "SerializationError",
    "ValidationError",
    "WrongTypeError",
    "WrongVersionError",
    "new",
]
