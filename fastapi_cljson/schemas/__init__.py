"""Pydantic schemas for Collection+JSON."""

from .collection import (
    VERSION,
    Collection,
    CollectionDocument,
    Data,
    Error,
    Item,
    Link,
    Query,
    Template,
    WriteTemplateDocument,
)

__all__ = [
    "VERSION",
    "Collection",
    "CollectionDocument",
    "Data",
    "Error",
    "Item",
    "Link",
    "Query",
    "Template",
    "WriteTemplateDocument",
]
