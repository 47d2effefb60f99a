"""
Name: Request builder.
Description: Turns a CallDescription into a ResolvedRequest. Resolves the endpoint against the base URL, serializes query parameters, merges headers and attaches the JSON body for methods that carry one.
"""

import json
from typing import Any, Dict, List, Mapping, Optional, Tuple
from urllib.parse import urlencode, urljoin, urlsplit, urlunsplit

from ..constants import BODY_METHODS, DEFAULT_HEADERS
from .models import CallDescription, ResolvedRequest


def stringify_query_value(value: Any) -> str:
    """Convert a single query value to its wire form.

    Args:
        value: A primitive or list of primitives

    Returns:
        The serialized value
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(stringify_query_value(item) for item in value)
    return str(value)


def serialize_query_params(query_params: Optional[Mapping[str, Any]]) -> str:
    """Serialize query parameters in the order they were supplied.

    None values are skipped entirely and lists are joined with a comma into a
    single parameter. Commas are left unescaped.

    Args:
        query_params: Mapping of parameter names to values

    Returns:
        The encoded query string, without a leading '?'
    """
    if not query_params:
        return ""

    pairs: List[Tuple[str, str]] = []
    for key, value in query_params.items():
        if value is None:
            continue
        pairs.append((key, stringify_query_value(value)))

    return urlencode(pairs, safe=",")


def resolve_url(base_url: str, endpoint: str, query: str = "") -> str:
    """Resolve an endpoint against a base URL and append a query string.

    Args:
        base_url: Absolute base URL of the API
        endpoint: Path relative to the base URL, with or without a leading slash
        query: Encoded query string to append

    Returns:
        The absolute URL
    """
    url = urljoin(base_url, endpoint)
    if not query:
        return url

    parts = urlsplit(url)
    combined = f"{parts.query}&{query}" if parts.query else query
    return urlunsplit(
        (parts.scheme, parts.netloc, parts.path, combined, parts.fragment)
    )


def merge_headers(*layers: Optional[Mapping[str, str]]) -> Dict[str, str]:
    """Merge header mappings, later layers overriding earlier ones.

    Header names are compared case-insensitively. The spelling from the
    layer that wins is the one kept.
    """
    merged: Dict[str, str] = {}
    for layer in layers:
        if not layer:
            continue
        for name, value in layer.items():
            for existing in [k for k in merged if k.lower() == name.lower()]:
                del merged[existing]
            merged[name] = value
    return merged


def build_request(
    description: CallDescription,
    default_headers: Optional[Mapping[str, str]] = None,
) -> ResolvedRequest:
    """Build the transport-ready request for a call description.

    Args:
        description: The call to resolve
        default_headers: Extra headers applied before the caller's own headers,
            for example credentials from configuration

    Returns:
        The resolved request
    """
    url = resolve_url(
        description.base_url,
        description.endpoint,
        serialize_query_params(description.query_params),
    )
    headers = merge_headers(DEFAULT_HEADERS, default_headers, description.headers)

    body = None
    # GET and DELETE never carry a body, even when one was supplied
    if description.body is not None and description.method in BODY_METHODS:
        body = json.dumps(description.body, separators=(",", ":"))

    return ResolvedRequest(
        method=description.method, url=url, headers=headers, body=body
    )
