"""URI assembly shared by every endpoint."""

import re
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any
from urllib.parse import quote

import httpx

API_KEY_PARAM = "api-key"

_API_KEY_RE = re.compile(rf"({API_KEY_PARAM}=)[^&#]*")


def _segment(value: Any) -> str:
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        return value.isoformat()
    return quote(str(value), safe="")


def resource_path(root: str, *segments: Any, fmt: str) -> str:
    """Join segments under root and put the format suffix on the last one.

    resource_path(root, 113, "house", "members", fmt="json")
        -> f"{root}/113/house/members.json"
    """
    return "/".join([root.rstrip("/"), *(_segment(s) for s in segments)]) + f".{fmt}"


def build_uri(path: str, api_key: str, params: Mapping[str, Any] | None = None) -> str:
    """Append api-key and any extra params as an encoded query string."""
    query = httpx.QueryParams({API_KEY_PARAM: api_key})
    if params:
        query = query.merge(params)
    return f"{path}?{query}"


def redact_uri(uri: str) -> str:
    """Hide the api key so URIs can be logged."""
    return _API_KEY_RE.sub(r"\1***", uri)
