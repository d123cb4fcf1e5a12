"""Masking utilities for values that must not reach the logs."""

from typing import Mapping

import httpx

from .constants import HEADER_API_KEY, QUERY_API_KEY

_SENSITIVE_HEADERS = frozenset({HEADER_API_KEY.lower(), "authorization"})
_SENSITIVE_QUERY = frozenset({QUERY_API_KEY.lower()})

MASK = "***"


def mask_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Return a copy of ``headers`` with credential values masked.

    Examples:
        >>> mask_headers({"Accept": "application/json", "X-Api-Key": "abc"})
        {'Accept': 'application/json', 'X-Api-Key': '***'}
    """
    return {
        name: MASK if name.lower() in _SENSITIVE_HEADERS else value
        for name, value in headers.items()
    }


def mask_url(url: httpx.URL) -> str:
    """Render ``url`` with the API key query parameter masked."""
    items = url.params.multi_items()
    if not any(key.lower() in _SENSITIVE_QUERY for key, _ in items):
        return str(url)
    masked = [
        (key, MASK if key.lower() in _SENSITIVE_QUERY else value)
        for key, value in items
    ]
    return str(url.copy_with(params=masked))
