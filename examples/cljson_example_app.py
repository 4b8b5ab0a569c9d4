"""Example FastAPI app serving a Collection+JSON friends list.

Run with:
    uvicorn examples.cljson_example_app:app --reload
"""
from __future__ import annotations

import threading

from fastapi import FastAPI, Request

from fastapi_cljson import (
    CollectionJSONResponse,
    Data,
    Error,
    Item,
    Link,
    Query,
    Resource,
    Template,
)
from fastapi_cljson.middleware import ContentNegotiationMiddleware, ErrorHandlerMiddleware
from fastapi_cljson.utils import read_template

app = FastAPI()
app.add_middleware(ContentNegotiationMiddleware)
app.add_middleware(ErrorHandlerMiddleware)

_friends: dict[str, dict[str, str]] = {
    "jdoe": {"full-name": "J. Doe", "email": "jdoe@example.org"},
    "msmith": {"full-name": "M. Smith", "email": "msmith@example.org"},
}
_friends_lock = threading.Lock()

FRIEND_TEMPLATE = Template(
    data=[
        Data(name="full-name", value="", prompt="Full Name"),
        Data(name="email", value="", prompt="Email"),
    ]
)


def friend_item(base: str, slug: str, fields: dict[str, str]) -> Item:
    return Item(
        href=f"{base}{slug}",
        data=[Data(name=name, value=value) for name, value in fields.items()],
        links=[Link(rel="blog", href=f"/blogs/{slug}", prompt="Blog")],
    )


@app.get("/friends/")
async def list_friends(request: Request) -> CollectionJSONResponse:
    base = request.url.path
    resource = Resource(base)
    resource.add_link(Link(rel="feed", href=f"{base}rss"))
    with _friends_lock:
        friends = dict(_friends)
    for slug, fields in friends.items():
        resource.add_item(friend_item(base, slug, fields))
    resource.add_query(
        Query(
            rel="search",
            href=f"{base}search",
            prompt="Search",
            data=[Data(name="search", value="")],
        )
    )
    resource.set_template(FRIEND_TEMPLATE)
    return CollectionJSONResponse(resource)


@app.post("/friends/")
async def create_friend(request: Request) -> CollectionJSONResponse:
    template = await read_template(request)
    fields = {entry.name: entry.value for entry in template.data or []}
    slug = fields.get("email", "").split("@")[0]
    if not slug:
        resource = Resource(request.url.path)
        resource.set_error(Error(title="Invalid friend", code="422", message="email is required"))
        return CollectionJSONResponse(resource, status_code=422)
    with _friends_lock:
        _friends[slug] = fields
    resource = Resource(request.url.path)
    resource.add_item(friend_item(request.url.path, slug, fields))
    return CollectionJSONResponse(resource, status_code=201)
