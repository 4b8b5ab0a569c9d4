"""Collection+JSON content negotiation middleware."""

from typing import Any, Iterable

from fastapi_cljson.core.errors import CollectionErrorBuilder
from fastapi_cljson.core.resource import CONTENT_TYPE
from fastapi_cljson.responses import CollectionJSONResponse
from fastapi_cljson.utils.content_negotiation import (
    accepts_collection_json,
    parse_media_type,
)


class ContentNegotiationMiddleware:
    """Ensure the Collection+JSON media type for requests and responses."""

    def __init__(
        self, app: Any, *, write_methods: Iterable[str] = ("POST", "PUT")
    ) -> None:
        """Store the ASGI app and the methods that must send a template body."""
        self.app = app
        self.write_methods = {method.upper() for method in write_methods}
        self.errors = CollectionErrorBuilder()

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Validate Collection+JSON headers before passing to downstream app."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        method = scope.get("method", "").upper()
        headers = {k.decode().lower(): v.decode() for k, v in scope.get("headers", [])}
        content_type = headers.get("content-type", "")
        accept = headers.get("accept", "")
        path = scope.get("path") or "/"

        if method in self.write_methods:
            parsed = parse_media_type(content_type)
            if parsed["media_type"] != CONTENT_TYPE:
                await self._reject(path, 415, "Unsupported Media Type", scope, receive, send)
                return

        if not accepts_collection_json(accept):
            await self._reject(path, 406, "Not Acceptable", scope, receive, send)
            return

        await self.app(scope, receive, send)

    async def _reject(
        self, path: str, status: int, title: str, scope: Any, receive: Any, send: Any
    ) -> None:
        resource = self.errors.error_resource(
            path, title=title, code=str(status), message=f"expected {CONTENT_TYPE}"
        )
        response = CollectionJSONResponse(resource, status_code=status)
        await response(scope, receive, send)
