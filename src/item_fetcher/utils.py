"""Utility functions for item normalization and page extraction."""

import re
from typing import Any, Dict, List, Optional, Tuple

from .errors import FetchError

IMAGE_BASE_URL = "https://img.pokemondb.net/artwork/"
IMAGE_EXTENSION = ".jpg"

_WHITESPACE_RE = re.compile(r"\s+")
_INVALID_CHARS_RE = re.compile(r"[^a-z0-9-]")


def normalize_item_name(name: str) -> str:
    """
    Turn a display name into a URL slug.

    Lowercases, collapses whitespace runs into a single hyphen and drops
    every character outside ``[a-z0-9-]``.

    Example:
        >>> normalize_item_name("Mr. Mime")
        'mr-mime'
    """
    slug = _WHITESPACE_RE.sub("-", name.lower())
    return _INVALID_CHARS_RE.sub("", slug)


def item_image_url(name: str) -> str:
    """Build the artwork URL for an item name."""
    return f"{IMAGE_BASE_URL}{normalize_item_name(name)}{IMAGE_EXTENSION}"


def extract_item(record: Dict[str, Any]) -> Dict[str, Any]:
    """
    Extract an item from a raw API record.

    Args:
        record: Raw record with at least ``id`` and ``name``

    Returns:
        Dictionary with ``id``, ``name`` and ``image``

    Raises:
        FetchError: If the record is not an object or has no string name
    """
    if not isinstance(record, dict) or not isinstance(record.get('name'), str):
        raise FetchError(f"Malformed item record: {record!r}")

    name = record['name']
    return {
        'id': record.get('id'),
        'name': name,
        'image': record.get('image') or item_image_url(name),
    }


def extract_page(envelope: Any) -> Tuple[List[Dict[str, Any]], Optional[Any]]:
    """
    Read items and the next-page token from a page envelope.

    Args:
        envelope: Decoded ``{"info": {"next": ...}, "results": [...]}`` body

    Returns:
        Tuple of (items, next token or None)

    Raises:
        FetchError: If the envelope does not have the expected shape
    """
    if not isinstance(envelope, dict):
        raise FetchError("Page envelope is not an object")

    results = envelope.get('results')
    info = envelope.get('info')
    if not isinstance(results, list) or not isinstance(info, dict):
        raise FetchError("Page envelope is missing 'results' or 'info'")

    items = [extract_item(record) for record in results]
    return items, info.get('next')
