"""Exceptions raised by the Up API client.

Every client call either returns a decoded value or raises exactly one
``UpError`` subclass, each naming the stage that failed:

- ``InvalidURLError``: the request URL could not be built or parsed
- ``TransportError``: the network exchange failed before a response arrived
- ``DecodeError``: a response body did not match the expected shape
- ``EncodeError``: a request body could not be serialized
- ``ApiError``: the API answered with a non-success status and an error body

``InvalidArgumentError`` sits outside that hierarchy. It reports a
caller bug (such as an empty identifier) detected before any request is built.
"""

from typing import List, Optional

from upbank.models.errors import ErrorObject, ErrorResponse


class UpError(Exception):
    """Base exception for Up API client errors."""

    pass


class InvalidURLError(UpError):
    """A request URL could not be constructed or parsed."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid URL '{url}': {reason}")


class TransportError(UpError):
    """The HTTP exchange failed before any response was received."""

    def __init__(self, method: str, url: str, reason: str):
        self.method = method
        self.url = url
        self.reason = reason
        super().__init__(f"{method} {url} failed: {reason}")


class DecodeError(UpError):
    """A response body could not be decoded into the expected shape.

    Occurrences indicate drift between this library and the API, not a
    problem with the caller's input.
    """

    def __init__(self, status_code: int, shape: str, reason: str, body: Optional[bytes] = None):
        self.status_code = status_code
        self.shape = shape
        self.reason = reason
        self.body = body
        super().__init__(f"Failed to decode {status_code} response as {shape}: {reason}")


class EncodeError(UpError):
    """A request body could not be serialized before sending."""

    def __init__(self, shape: str, reason: str):
        self.shape = shape
        self.reason = reason
        super().__init__(f"Failed to encode {shape} request body: {reason}")


class ApiError(UpError):
    """The API returned a non-success status with a well-formed error body."""

    def __init__(self, status_code: int, response: ErrorResponse):
        self.status_code = status_code
        self.response = response

        details = [f"{error.title}: {error.detail}" for error in response.errors]
        super().__init__(f"Up API error {status_code}: {'; '.join(details)}")

    @property
    def errors(self) -> List[ErrorObject]:
        return self.response.errors


class InvalidArgumentError(ValueError):
    """A caller passed an argument that would change the meaning of a request."""

    pass


def require_id(value: str, what: str) -> str:
    """Reject empty identifiers before they reach a URL.

    An empty id would turn ``/accounts/{id}`` into ``/accounts/``.
    """
    if not value or not value.strip():
        raise InvalidArgumentError(f"The provided {what} ID must not be empty.")
    return value
