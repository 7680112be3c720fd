"""Tests for upbank.errors module."""

import pytest

from upbank.errors import (
    ApiError,
    DecodeError,
    EncodeError,
    InvalidArgumentError,
    InvalidURLError,
    TransportError,
    UpError,
    require_id,
)
from upbank.models import ErrorResponse


def make_error_response(*entries):
    return ErrorResponse.model_validate({"errors": list(entries)})


class TestApiError:

    def test_message_joins_titles_and_details(self):
        response = make_error_response(
            {"status": "422", "title": "Invalid Attribute", "detail": "url must be https"},
            {"status": "422", "title": "Limit Reached", "detail": "Too many webhooks"},
        )

        error = ApiError(422, response)

        assert str(error) == (
            "Up API error 422: Invalid Attribute: url must be https; Limit Reached: Too many webhooks"
        )
        assert error.errors == response.errors
        assert error.response is response

    def test_source_pointer(self):
        response = make_error_response(
            {"status": "422", "title": "Invalid", "detail": "bad", "source": {"pointer": "/data/attributes/url"}}
        )

        assert ApiError(422, response).errors[0].source.pointer == "/data/attributes/url"


@pytest.mark.parametrize("error", [
    InvalidURLError("x", "bad"),
    TransportError("GET", "https://x", "refused"),
    DecodeError(200, "PingResponse", "invalid json"),
    EncodeError("CreateWebhookRequest", "bad value"),
    ApiError(404, make_error_response({"status": "404", "title": "Not Found", "detail": "missing"})),
])
def test_every_kind_is_an_up_error(error):
    assert isinstance(error, UpError)


def test_kinds_are_distinct():
    assert not issubclass(DecodeError, ApiError)
    assert not issubclass(ApiError, DecodeError)


class TestRequireId:

    def test_accepts_id(self):
        assert require_id("acc-1", "account") == "acc-1"

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_rejects_empty(self, value):
        with pytest.raises(InvalidArgumentError) as exc_info:
            require_id(value, "account")

        assert "account ID must not be empty" in str(exc_info.value)
