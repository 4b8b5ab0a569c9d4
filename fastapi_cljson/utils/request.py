"""Request body helpers for Collection+JSON write templates."""

from fastapi import Request
from pydantic import ValidationError as PydanticValidationError

from fastapi_cljson.core.errors import ParseError
from fastapi_cljson.schemas.collection import Template, WriteTemplateDocument


def parse_template(raw: bytes | str) -> Template:
    """Decode a ``{"template": {"data": [...]}}`` body into a checked template."""
    try:
        document = WriteTemplateDocument.model_validate_json(raw)
    except PydanticValidationError as exc:
        raise ParseError(f"invalid write template: {exc}") from exc
    document.template.check()
    return document.template


async def read_template(request: Request) -> Template:
    """Read and decode the write template sent with ``request``."""
    return parse_template(await request.body())
