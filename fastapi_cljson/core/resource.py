"""Thread safe Collection+JSON resource aggregate."""

from __future__ import annotations

import logging
import threading
from typing import Any, List, Optional

from pydantic import ValidationError as PydanticValidationError

from fastapi_cljson.core.errors import (
    ChildValidationError,
    MarshalError,
    MissingFieldError,
    ParseError,
    SerializationError,
    ValidationError,
    WrongVersionError,
)
from fastapi_cljson.schemas.collection import (
    VERSION,
    Collection,
    CollectionDocument,
    Error,
    Item,
    Link,
    Query,
    Template,
    expect_type,
)

logger = logging.getLogger(__name__)

# Must be set as the Content-Type of HTTP responses carrying a resource.
CONTENT_TYPE = "application/vnd.collection+json"


class Resource:
    """Top-level Collection+JSON document built up by a producer.

    All mutators check their argument before committing it, and every
    operation that reads or writes the collection holds the instance lock,
    so a resource can be shared between threads building one response.

    Example::

        resource = Resource("/api/")
        resource.add_link(Link(rel="home", href="/api/"))
        resource.add_item(Item(href="/api/bob", data=[Data(name="name", value="bob")]))
        body = resource.marshal()
    """

    def __init__(self, root: str) -> None:
        """Initialize a version 1.0 document located at ``root``."""
        self.collection = Collection(version=VERSION, href=root)
        self._lock = threading.Lock()

    def add_link(self, link: Link) -> None:
        """Check ``link`` and append it to the document links."""
        self._append("links", "link", Link, link)

    def add_item(self, item: Item) -> None:
        """Check ``item`` and its embedded links, then append it."""
        self._append("items", "item", Item, item)

    def add_query(self, query: Query) -> None:
        """Check ``query`` and append it to the document queries."""
        self._append("queries", "query", Query, query)

    def set_template(self, template: Template) -> None:
        """Replace the document template."""
        self._replace("template", Template, template)

    def set_error(self, error: Error) -> None:
        """Replace the document error."""
        self._replace("error", Error, error)

    def validate(self) -> None:
        """Check the whole document, raising the first violation found."""
        with self._lock:
            self._validate()

    def marshal(self) -> bytes:
        """Validate the document and return its JSON encoding."""
        with self._lock:
            try:
                self._validate()
            except ValidationError as exc:
                logger.debug("Refusing to marshal %s: %s", self.collection.href, exc)
                raise MarshalError(exc) from exc
            try:
                document = CollectionDocument(collection=self.collection)
                return document.model_dump_json(exclude_none=True).encode("utf-8")
            except (TypeError, ValueError) as exc:
                raise SerializationError(
                    f"Resource marshalling failed with error '{exc}'"
                ) from exc

    def to_dict(self) -> dict[str, Any]:
        """Return the validated document as a JSON compatible mapping."""
        with self._lock:
            self._validate()
            document = CollectionDocument(collection=self.collection)
            return document.model_dump(mode="json", exclude_none=True)

    @classmethod
    def from_json(cls, raw: bytes | str) -> Resource:
        """Decode a Collection+JSON document and validate it."""
        try:
            document = CollectionDocument.model_validate_json(raw)
        except PydanticValidationError as exc:
            raise ParseError(f"invalid Collection+JSON document: {exc}") from exc
        collection = document.collection
        if "version" not in collection.model_fields_set:
            collection.version = ""
        resource = cls(collection.href)
        resource.collection = collection
        resource.validate()
        return resource

    @property
    def version(self) -> str:
        with self._lock:
            return self.collection.version

    @property
    def href(self) -> str:
        with self._lock:
            return self.collection.href

    @property
    def links(self) -> Optional[List[Link]]:
        return self._snapshot("links")

    @property
    def items(self) -> Optional[List[Item]]:
        return self._snapshot("items")

    @property
    def queries(self) -> Optional[List[Query]]:
        return self._snapshot("queries")

    @property
    def template(self) -> Optional[Template]:
        return self._snapshot("template")

    @property
    def error(self) -> Optional[Error]:
        return self._snapshot("error")

    def _append(self, slot: str, kind: str, model: type, entity: Any) -> None:
        with self._lock:
            try:
                expect_type(entity, model)
                entity.check()
            except ValidationError:
                logger.debug("Rejected %s for %s", kind, self.collection.href)
                raise
            children = getattr(self.collection, slot)
            if children is None:
                children = []
                setattr(self.collection, slot, children)
            children.append(entity.model_copy(deep=True))

    def _replace(self, slot: str, model: type, entity: Any) -> None:
        with self._lock:
            expect_type(entity, model)
            entity.check()
            setattr(self.collection, slot, entity.model_copy(deep=True))

    def _snapshot(self, slot: str) -> Any:
        with self._lock:
            value = getattr(self.collection, slot)
            if value is None:
                return None
            if isinstance(value, list):
                return [child.model_copy(deep=True) for child in value]
            return value.model_copy(deep=True)

    def _validate(self) -> None:
        collection = self.collection
        if not collection.version:
            raise MissingFieldError("version", "version is missing. Must be '1.0'")
        if collection.version != VERSION:
            raise WrongVersionError(collection.version)
        if not collection.href:
            raise MissingFieldError(
                "href", "'href' is empty. Must contain resource location"
            )

        for slot, kind, model in (
            ("links", "link", Link),
            ("items", "item", Item),
            ("queries", "query", Query),
        ):
            for index, child in enumerate(getattr(collection, slot) or []):
                _check_child(child, model, kind, index)

        if collection.template is not None:
            _check_child(collection.template, Template, "template", None)
        if collection.error is not None:
            _check_child(collection.error, Error, "resource error", None)


def new(root: str) -> Resource:
    """Return a new resource located at ``root``."""
    return Resource(root)


def _check_child(child: Any, model: type, kind: str, index: int | None) -> None:
    try:
        expect_type(child, model)
        child.check()
    except ValidationError as exc:
        raise ChildValidationError(kind, index, exc) from exc
