"""Pydantic schema templates for Collection+JSON 1.0 documents."""

from typing import Any, ClassVar, FrozenSet, List, Optional

from pydantic import BaseModel, model_serializer

from fastapi_cljson.core.errors import (
    ChildValidationError,
    MissingFieldError,
    ValidationError,
    WrongTypeError,
)

VERSION = "1.0"


class Entity(BaseModel):
    """Base for child entities; optional members left empty are not emitted."""

    omit_if_empty: ClassVar[FrozenSet[str]] = frozenset()

    @model_serializer(mode="wrap")
    def serialize_entity(self, handler: Any) -> dict[str, Any]:
        data = handler(self)
        return {
            key: value
            for key, value in data.items()
            if not (key in self.omit_if_empty and value in ("", []))
        }

    def check(self) -> None:
        """Entities carry no required fields unless they override this."""


class Data(Entity):
    """Name/value pair used by items, queries and templates."""

    omit_if_empty: ClassVar[FrozenSet[str]] = frozenset({"prompt"})

    name: str = ""
    value: str = ""
    prompt: Optional[str] = None


class Link(Entity):
    """Hyperlink relation. rel and href are required."""

    omit_if_empty: ClassVar[FrozenSet[str]] = frozenset({"name", "prompt", "render"})

    rel: str = ""
    href: str = ""
    name: Optional[str] = None
    prompt: Optional[str] = None
    render: Optional[str] = None

    def check(self) -> None:
        """Raise MissingFieldError if rel or href is empty."""
        _require(self, "rel", "href")


class Item(Entity):
    """Collection member with its own address, data and links."""

    omit_if_empty: ClassVar[FrozenSet[str]] = frozenset({"data", "links"})

    href: str = ""
    data: Optional[List[Data]] = None
    links: Optional[List[Link]] = None

    def check(self) -> None:
        """Check href, then every embedded link in order."""
        _require(self, "href")
        expect_type(self.data or [], Data)
        for index, link in enumerate(self.links or []):
            try:
                expect_type(link, Link)
                link.check()
            except ValidationError as exc:
                raise ChildValidationError("link", index, exc) from exc


class Query(Entity):
    """Parameterized search or action descriptor."""

    omit_if_empty: ClassVar[FrozenSet[str]] = frozenset({"name", "prompt", "data"})

    rel: str = ""
    href: str = ""
    name: Optional[str] = None
    prompt: Optional[str] = None
    data: Optional[List[Data]] = None

    def check(self) -> None:
        """Raise MissingFieldError if rel or href is empty."""
        _require(self, "rel", "href")
        expect_type(self.data or [], Data)


class Template(Entity):
    """Writable form describing the fields of an item."""

    omit_if_empty: ClassVar[FrozenSet[str]] = frozenset({"data"})

    data: Optional[List[Data]] = None

    def check(self) -> None:
        expect_type(self.data or [], Data)


class Error(Entity):
    """Document level error payload."""

    omit_if_empty: ClassVar[FrozenSet[str]] = frozenset({"title", "code", "message"})

    title: Optional[str] = None
    code: Optional[str] = None
    message: Optional[str] = None


class Collection(BaseModel):
    """Body of a Collection+JSON document."""

    version: str = VERSION
    href: str = ""
    links: Optional[List[Link]] = None
    items: Optional[List[Item]] = None
    queries: Optional[List[Query]] = None
    template: Optional[Template] = None
    error: Optional[Error] = None


class CollectionDocument(BaseModel):
    """Top-level Collection+JSON document."""

    collection: Collection


class WriteTemplateDocument(BaseModel):
    """Body sent by a client to create or update an item."""

    template: Template


def expect_type(value: Any, model: type) -> None:
    """Raise WrongTypeError unless ``value`` (or each entry of a list) is a ``model``."""
    for entry in value if isinstance(value, list) else [value]:
        if not isinstance(entry, model):
            raise WrongTypeError(model, entry)


def _require(entity: BaseModel, *fields: str) -> None:
    for field in fields:
        if not getattr(entity, field, None):
            raise MissingFieldError(field)
