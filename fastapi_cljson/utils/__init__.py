"""Utility helpers for Collection+JSON headers and request bodies."""

from .content_negotiation import accepts_collection_json, parse_media_type
from .request import parse_template, read_template

__all__ = [
    "accepts_collection_json",
    "parse_media_type",
    "parse_template",
    "read_template",
]
