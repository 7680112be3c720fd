"""
Typed client for the Up Bank API.

Provides:
- Accounts, transactions, categories, tags and webhooks endpoints
- Uniform forward/backward pagination over every list response
- A closed set of exceptions naming the stage that failed
"""

from .client import BASE_URL, UpClient
from .errors import (
    ApiError,
    DecodeError,
    EncodeError,
    InvalidArgumentError,
    InvalidURLError,
    TransportError,
    UpError,
)
from .pagination import Page, PageLinks

__all__ = [
    "BASE_URL",
    "UpClient",
    "UpError",
    "ApiError",
    "DecodeError",
    "EncodeError",
    "InvalidArgumentError",
    "InvalidURLError",
    "TransportError",
    "Page",
    "PageLinks",
]
