"""Starlette response carrying a Collection+JSON resource."""

from typing import Any

from starlette.responses import Response

from fastapi_cljson.core.resource import CONTENT_TYPE, Resource


class CollectionJSONResponse(Response):
    """Render a Resource with the Collection+JSON media type.

    Rendering validates the resource first; an invalid resource raises
    MarshalError and no body is produced.
    """

    media_type = CONTENT_TYPE

    def render(self, content: Any) -> bytes:
        if isinstance(content, Resource):
            return content.marshal()
        return super().render(content)
