"""Collection+JSON error handling middleware."""

import logging
from typing import Any

from fastapi_cljson.core.errors import (
    CollectionErrorBuilder,
    MarshalError,
    ParseError,
    ValidationError,
)
from fastapi_cljson.responses import CollectionJSONResponse

logger = logging.getLogger(__name__)


class ErrorHandlerMiddleware:
    """Convert exceptions into Collection+JSON error documents."""

    def __init__(self, app: Any, *, expose_details: bool = True) -> None:
        """Store the ASGI app; ``expose_details`` puts the exception text in the body."""
        self.app = app
        self.expose_details = expose_details
        self.errors = CollectionErrorBuilder()

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Handle exceptions and serialize Collection+JSON error documents."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        try:
            await self.app(scope, receive, send)
        except MarshalError as exc:
            logger.exception("Invalid document built for %s", scope.get("path"))
            await self._respond(scope, receive, send, 500, "Internal Server Error", exc)
        except (ParseError, ValidationError) as exc:
            logger.warning("Collection+JSON error on %s: %s", scope.get("path"), exc)
            await self._respond(scope, receive, send, 400, "Bad Request", exc)
        except Exception as exc:
            logger.exception("Unhandled error on %s", scope.get("path"))
            await self._respond(scope, receive, send, 500, "Internal Server Error", exc)

    async def _respond(
        self, scope: Any, receive: Any, send: Any, status: int, title: str, exc: Exception
    ) -> None:
        resource = self.errors.error_resource(
            scope.get("path") or "/",
            title=title,
            code=str(status),
            message=str(exc) if self.expose_details else title,
        )
        response = CollectionJSONResponse(resource, status_code=status)
        await response(scope, receive, send)
