"""Collection+JSON error taxonomy and error document templates."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastapi_cljson.core.resource import Resource


class CollectionJSONError(ValueError):
    """Base class for every error raised by this package."""


class ValidationError(CollectionJSONError):
    """A document or one of its children breaks a syntax rule."""


class MissingFieldError(ValidationError):
    """A required field is empty or absent."""

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"'{field}' attr is empty")


class WrongVersionError(ValidationError):
    """The document version is present but is not 1.0."""

    def __init__(self, version: object) -> None:
        self.version = version
        super().__init__(f"wrong version {version!r}. Must be '1.0'")


class WrongTypeError(ValidationError):
    """A child slot holds something other than the expected entity."""

    def __init__(self, expected: type, value: object) -> None:
        self.expected = expected
        self.value = value
        super().__init__(
            f"expected {expected.__name__}, got {type(value).__name__}"
        )


class ChildValidationError(ValidationError):
    """A nested link, item, query, template or error failed its own check."""

    def __init__(self, kind: str, index: int | None, cause: Exception) -> None:
        self.kind = kind
        self.index = index
        self.cause = cause
        position = kind if index is None else f"{kind} {index}"
        super().__init__(f"failed to validate {position}: {cause}")
        self.__cause__ = cause


class MarshalError(CollectionJSONError):
    """marshal() refused to encode an invalid resource."""

    def __init__(self, cause: Exception) -> None:
        self.cause = cause
        super().__init__(f"Resource marshalling failed with error '{cause}'")
        self.__cause__ = cause


class SerializationError(CollectionJSONError):
    """The encoder failed on an otherwise valid resource."""


class ParseError(CollectionJSONError):
    """Wire data could not be decoded into a Collection+JSON structure."""


class CollectionErrorBuilder:
    """Build Collection+JSON error documents."""

    def error_resource(
        self,
        href: str,
        *,
        title: str | None = None,
        code: str | None = None,
        message: str | None = None,
    ) -> "Resource":
        """Return a resource carrying only an error object."""
        from fastapi_cljson.core.resource import Resource
        from fastapi_cljson.schemas.collection import Error

        if title is None and code is None and message is None:
            raise ValueError("Error object must include at least one field.")
        resource = Resource(href)
        resource.set_error(Error(title=title, code=code, message=message))
        return resource

    def error_document(self, href: str, **fields: str | None) -> bytes:
        """Return the encoded error document."""
        return self.error_resource(href, **fields).marshal()
