"""Helpers for Collection+JSON content negotiation."""

from __future__ import annotations

from typing import Any

from fastapi_cljson.core.resource import CONTENT_TYPE


def _split_parameters(value: str) -> list[str]:
    return [part.strip() for part in value.split(";") if part.strip()]


def parse_media_type(content_type: str) -> dict[str, Any]:
    """Parse a media type header into its type and parameters."""
    parts = _split_parameters(content_type)
    media_type = parts[0].lower() if parts else ""
    params: dict[str, str] = {}

    for param in parts[1:]:
        if "=" not in param:
            continue
        name, raw_value = param.split("=", 1)
        raw_value = raw_value.strip()
        if raw_value.startswith('"') and raw_value.endswith('"'):
            raw_value = raw_value[1:-1]
        params[name.strip().lower()] = raw_value
    return {"media_type": media_type, "params": params}


def _quality(params: dict[str, str]) -> float:
    try:
        return float(params.get("q", "1"))
    except ValueError:
        return 1.0


def accepts_collection_json(accept: str) -> bool:
    """Return True if an Accept header allows Collection+JSON responses.

    The most specific matching range decides: an explicit ``q=0`` on the
    Collection+JSON type wins over ``application/*`` and ``*/*``.
    """
    if not accept.strip():
        return True
    qualities: dict[str, float] = {}
    for media_range in accept.split(","):
        parsed = parse_media_type(media_range)
        media_type = parsed["media_type"]
        if media_type in {CONTENT_TYPE, "application/*", "*/*"}:
            qualities[media_type] = _quality(parsed["params"])
    for media_type in (CONTENT_TYPE, "application/*", "*/*"):
        if media_type in qualities:
            return qualities[media_type] > 0
    return False
