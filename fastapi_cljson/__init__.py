"""FastAPI Collection+JSON 1.0 package."""

from .core.errors import (
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
from .core.resource import CONTENT_TYPE, Resource, new
from .responses import CollectionJSONResponse
from .schemas.collection import Data, Error, Item, Link, Query, Template

__all__ = [
    "CONTENT_TYPE",
    "ChildValidationError",
    "CollectionErrorBuilder",
    "CollectionJSONError",
    "CollectionJSONResponse",
    "Data",
    "Error",
    "Item",
    "Link",
    "MarshalError",
    "MissingFieldError",
    "ParseError",
    "Query",
    "Resource",
    "SerializationError",
    "Template",
    "ValidationError",
    "WrongTypeError",
    "WrongVersionError",
    "new",
]
