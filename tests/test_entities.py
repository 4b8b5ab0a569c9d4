"""Tests for the per-entity syntax checks."""

import pytest

from fastapi_cljson import (
    ChildValidationError,
    Data,
    Error,
    Item,
    Link,
    MissingFieldError,
    Query,
    Template,
)


def test_link_requires_rel():
    """A link without rel is rejected."""
    with pytest.raises(MissingFieldError) as exc_info:
        Link(href="/api/").check()
    assert exc_info.value.field == "rel"
    assert str(exc_info.value) == "'rel' attr is empty"


def test_link_requires_href():
    """A link without href is rejected."""
    with pytest.raises(MissingFieldError) as exc_info:
        Link(rel="home").check()
    assert exc_info.value.field == "href"


def test_link_with_rel_and_href_passes():
    Link(rel="home", href="/api/", render="link").check()


def test_query_requires_rel_and_href():
    """Queries follow the same rule as links."""
    with pytest.raises(MissingFieldError):
        Query(href="/search").check()
    with pytest.raises(MissingFieldError):
        Query(rel="search").check()
    Query(rel="search", href="/search", data=[Data(name="q")]).check()


def test_item_requires_href():
    with pytest.raises(MissingFieldError) as exc_info:
        Item(data=[Data(name="name", value="bob")]).check()
    assert exc_info.value.field == "href"


def test_item_reports_first_failing_link_index():
    """Embedded links are checked in order and the first failure is reported."""
    item = Item(
        href="/api/bob",
        links=[
            Link(rel="blog", href="/blogs/bob"),
            Link(rel="", href="/avatars/bob"),
            Link(rel="home", href=""),
        ],
    )
    with pytest.raises(ChildValidationError) as exc_info:
        item.check()
    assert exc_info.value.kind == "link"
    assert exc_info.value.index == 1
    assert isinstance(exc_info.value.cause, MissingFieldError)
    assert exc_info.value.__cause__ is exc_info.value.cause
    assert str(exc_info.value) == "failed to validate link 1: 'rel' attr is empty"


def test_item_data_is_unconstrained():
    Item(href="/api/bob", data=[Data()]).check()


def test_template_and_error_always_pass():
    """Templates and errors carry no required fields."""
    Template().check()
    Template(data=[Data(name="email", prompt="Email")]).check()
    Error().check()
    Error(code="273841").check()
