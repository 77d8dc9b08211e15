"""Helpers for pulling required fields out of JSON response bodies."""

from __future__ import annotations

from typing import Any

import httpx

from lingochat.core.exceptions import MalformedResponseError


def read_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise MalformedResponseError("Response body is not valid JSON") from e


def require_text(data: Any, *path: str | int) -> str:
    """Walk *path* through nested dicts/lists and return a non-empty string.

    Raises:
        MalformedResponseError: Any step is missing, or the leaf is empty
            or not a string.
    """
    node = data
    for key in path:
        try:
            node = node[key]
        except (KeyError, IndexError, TypeError) as e:
            raise MalformedResponseError() from e
    if not isinstance(node, str) or not node:
        raise MalformedResponseError()
    return node
