"""Query string construction for Up API list endpoints."""

from datetime import date, datetime
from enum import Enum
from typing import Any, Iterable, Tuple
from urllib.parse import quote, urlsplit

from upbank.errors import InvalidURLError

PAGE_SIZE = "page[size]"


def filter_param(name: str) -> str:
    """Wire name of a filter, e.g. ``filter_param("status") -> "filter[status]"``."""
    return f"filter[{name}]"


def format_value(value: Any) -> str:
    """Render a query value as text before percent-encoding."""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def validate_url(url: str) -> str:
    """Ensure ``url`` is an absolute http(s) URL."""
    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise InvalidURLError(url, str(e)) from e

    if parts.scheme not in ("http", "https"):
        raise InvalidURLError(url, "scheme must be http or https")
    if not parts.netloc:
        raise InvalidURLError(url, "missing host")
    return url


def path_segment(value: str) -> str:
    """Percent-encode an identifier so it stays a single path segment."""
    return quote(value, safe="")


def build_query(params: Iterable[Tuple[str, Any]]) -> str:
    """Serialize ``(name, value)`` pairs in order, skipping unset values."""
    entries = []
    for name, value in params:
        if value is None:
            continue
        text = format_value(value)
        if text == "":
            continue
        entries.append(f"{quote(name, safe='[]')}={quote(text, safe='')}")
    return "&".join(entries)


def build_url(base_url: str, params: Iterable[Tuple[str, Any]] = ()) -> str:
    """Append the query string for ``params`` to ``base_url``.

    Returns ``base_url`` untouched (no trailing ``?``) when no parameter
    carries a value. Raises ``InvalidURLError`` if ``base_url`` is not an
    absolute http(s) URL.
    """
    validate_url(base_url)

    query = build_query(params)
    if not query:
        return base_url

    separator = "&" if urlsplit(base_url).query else "?"
    return f"{base_url}{separator}{query}"
