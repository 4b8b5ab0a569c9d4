"""Tests for the FastAPI and starlette integration."""

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from fastapi_cljson import (
    CONTENT_TYPE,
    CollectionErrorBuilder,
    CollectionJSONResponse,
    Data,
    Item,
    Link,
    ParseError,
    Resource,
)
from fastapi_cljson.middleware import ContentNegotiationMiddleware, ErrorHandlerMiddleware
from fastapi_cljson.utils import (
    accepts_collection_json,
    parse_media_type,
    parse_template,
    read_template,
)


@pytest.fixture
def client() -> TestClient:
    app = FastAPI()
    app.add_middleware(ContentNegotiationMiddleware)
    app.add_middleware(ErrorHandlerMiddleware)

    @app.get("/friends/")
    async def friends(request: Request) -> CollectionJSONResponse:
        resource = Resource(request.url.path)
        resource.add_link(Link(rel="home", href="/"))
        resource.add_item(Item(href="/friends/jdoe", data=[Data(name="email", value="jdoe@example.org")]))
        return CollectionJSONResponse(resource)

    @app.post("/friends/")
    async def create(request: Request) -> CollectionJSONResponse:
        template = await read_template(request)
        resource = Resource(request.url.path)
        resource.add_item(Item(href="/friends/new", data=template.data))
        return CollectionJSONResponse(resource, status_code=201)

    @app.get("/broken/")
    async def broken() -> CollectionJSONResponse:
        resource = Resource("/broken/")
        resource.collection.version = "0.9"
        return CollectionJSONResponse(resource)

    @app.get("/boom/")
    async def boom() -> None:
        raise RuntimeError("kaboom")

    return TestClient(app)


def test_response_uses_collection_media_type(client):
    response = client.get("/friends/")
    assert response.status_code == 200
    assert response.headers["content-type"] == CONTENT_TYPE
    body = response.json()["collection"]
    assert body["href"] == "/friends/"
    assert body["items"][0]["data"] == [{"name": "email", "value": "jdoe@example.org"}]


def test_post_template(client):
    response = client.post(
        "/friends/",
        content=b'{"template": {"data": [{"name": "email", "value": "a@b.c"}]}}',
        headers={"Content-Type": CONTENT_TYPE},
    )
    assert response.status_code == 201
    assert response.json()["collection"]["items"][0]["data"][0]["value"] == "a@b.c"


def test_post_wrong_content_type_is_rejected(client):
    response = client.post(
        "/friends/", content=b"{}", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 415
    assert response.json()["collection"]["error"]["code"] == "415"


def test_not_acceptable(client):
    response = client.get("/friends/", headers={"Accept": "text/html"})
    assert response.status_code == 406
    assert response.headers["content-type"] == CONTENT_TYPE


def test_malformed_template_is_bad_request(client):
    response = client.post(
        "/friends/", content=b'{"data": []}', headers={"Content-Type": CONTENT_TYPE}
    )
    assert response.status_code == 400
    assert response.json()["collection"]["error"]["title"] == "Bad Request"


def test_invalid_resource_is_never_sent(client):
    """An invalid resource produces an error document, not its own body."""
    response = client.get("/broken/")
    assert response.status_code == 500
    error = response.json()["collection"]["error"]
    assert error["title"] == "Internal Server Error"
    assert "wrong version" in error["message"]


def test_unhandled_error_becomes_error_document(client):
    response = client.get("/boom/")
    assert response.status_code == 500
    body = response.json()["collection"]
    assert body["href"] == "/boom/"
    assert body["error"]["message"] == "kaboom"


def test_error_builder_requires_a_field():
    with pytest.raises(ValueError):
        CollectionErrorBuilder().error_resource("/api/")


def test_parse_template_rejects_bad_bodies():
    with pytest.raises(ParseError):
        parse_template(b"")
    template = parse_template(b'{"template": {"data": [{"name": "q", "value": ""}]}}')
    assert template.data[0].name == "q"


def test_parse_media_type():
    parsed = parse_media_type('Application/VND.collection+json; charset="utf-8"')
    assert parsed == {
        "media_type": "application/vnd.collection+json",
        "params": {"charset": "utf-8"},
    }


@pytest.mark.parametrize(
    ("accept", "expected"),
    [
        ("", True),
        ("*/*", True),
        ("application/*", True),
        ("text/html, application/vnd.collection+json;q=0.9", True),
        ("application/vnd.collection+json;q=0", False),
        ("application/json", False),
        ("application/vnd.collection+json;q=0, */*", False),
        ("application/vnd.collection+json;q=0.0000, application/*", False),
        ("text/html;q=1, */*;q=0.001", True),
        ("application/*;q=0, */*", False),
        ("application/vnd.collection+json;q=0.5, */*;q=0", True),
    ],
)
def test_accepts_collection_json(accept, expected):
    assert accepts_collection_json(accept) is expected
