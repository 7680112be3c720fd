"""Up Bank API client."""

from typing import List, Optional, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from upbank.errors import (
    ApiError,
    DecodeError,
    EncodeError,
    InvalidArgumentError,
    InvalidURLError,
    TransportError,
    require_id,
)
from upbank.logger import get_logger
from upbank.models.accounts import AccountResource, ListAccountsOptions
from upbank.models.categories import (
    CategorizeTransactionRequest,
    CategoryList,
    CategoryResource,
    ListCategoriesOptions,
)
from upbank.models.common import Document, ListOptions
from upbank.models.errors import ErrorResponse
from upbank.models.tags import ListTagsOptions, TagResource, UpdateTagsRequest
from upbank.models.transactions import ListTransactionsOptions, TransactionResource
from upbank.models.utilities import PingResponse
from upbank.models.webhooks import (
    CreateWebhookRequest,
    ListWebhookLogsOptions,
    ListWebhooksOptions,
    WebhookDeliveryLogResource,
    WebhookEventResource,
    WebhookResource,
)
from upbank.pagination import Page
from upbank.query import build_url, path_segment, validate_url

logger = get_logger("upbank.client")

BASE_URL = "https://api.up.com.au/api/v1"
DEFAULT_TIMEOUT = 30

HTTP_OK = 200
HTTP_CREATED = 201
HTTP_NO_CONTENT = 204

M = TypeVar("M", bound=BaseModel)


class UpClient:
    """
    Client for the Up Bank API.

    One instance holds the access token and a single ``requests.Session``,
    which owns connection pooling. The client carries no other state.
    Every call returns a decoded model or raises an ``UpError`` subclass.
    """

    def __init__(
        self,
        access_token: str,
        base_url: str = BASE_URL,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        if not access_token:
            raise InvalidArgumentError("An access token is required.")
        self._access_token = access_token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def __repr__(self) -> str:
        return f"UpClient(base_url={self.base_url!r})"

    def _auth_header(self) -> str:
        return f"Bearer {self._access_token}"

    # ----------------------------------------------------------------- core

    def _dispatch(self, method: str, url: str, body: Optional[bytes] = None) -> requests.Response:
        """Send exactly one request. No retries."""
        headers = {"Authorization": self._auth_header()}
        if body is not None:
            headers["Content-Type"] = "application/json"

        logger.debug(f"{method} {url}")
        try:
            response = self.session.request(
                method, url, data=body, headers=headers, timeout=self.timeout
            )
        except (
            requests.exceptions.InvalidURL,
            requests.exceptions.MissingSchema,
            requests.exceptions.InvalidSchema,
        ) as e:
            raise InvalidURLError(url, str(e)) from e
        except requests.RequestException as e:
            raise TransportError(method, url, str(e)) from e

        logger.debug(f"{method} {url} -> {response.status_code}")
        return response

    def _classify(
        self,
        response: requests.Response,
        shape: Optional[Type[M]],
        success_status: int,
    ) -> Optional[M]:
        """Decode a success body into ``shape`` or raise the matching error."""
        status = response.status_code

        if status == success_status:
            if success_status == HTTP_NO_CONTENT or shape is None:
                return None
            try:
                return shape.model_validate_json(response.content)
            except ValidationError as e:
                raise DecodeError(status, shape.__name__, str(e), response.content) from e

        try:
            error_response = ErrorResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise DecodeError(status, ErrorResponse.__name__, str(e), response.content) from e

        logger.debug(f"API error {status}: {error_response.errors}")
        raise ApiError(status, error_response)

    def _encode(self, body: BaseModel) -> bytes:
        try:
            return body.model_dump_json(by_alias=True).encode("utf-8")
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise EncodeError(type(body).__name__, str(e)) from e

    def _request(
        self,
        method: str,
        path: str,
        shape: Optional[Type[M]] = None,
        success_status: int = HTTP_OK,
        options: Optional[ListOptions] = None,
        body: Optional[BaseModel] = None,
    ) -> Optional[M]:
        """Build the URL, send the request and decode the response."""
        params = options.query_params() if options is not None else ()
        url = build_url(f"{self.base_url}{path}", params)
        payload = self._encode(body) if body is not None else None

        response = self._dispatch(method, url, payload)
        return self._classify(response, shape, success_status)

    def follow_link(self, url: str, shape: Type[M]) -> M:
        """GET an absolute link returned by the API (e.g. a pagination link) as ``shape``."""
        validate_url(url)
        response = self._dispatch("GET", url)
        return self._classify(response, shape, HTTP_OK)

    # ------------------------------------------------------------ utilities

    def ping(self) -> PingResponse:
        """Verify that the access token is accepted."""
        return self._request("GET", "/util/ping", PingResponse)

    # ------------------------------------------------------------- accounts

    def list_accounts(self, options: Optional[ListAccountsOptions] = None) -> Page[AccountResource]:
        """Get the first page of accounts for the authenticated customer."""
        return self._request("GET", "/accounts", Page[AccountResource], options=options)

    def get_account(self, account_id: str) -> Document[AccountResource]:
        require_id(account_id, "account")
        return self._request("GET", f"/accounts/{path_segment(account_id)}", Document[AccountResource])

    # --------------------------------------------------------- transactions

    def list_transactions(
        self, options: Optional[ListTransactionsOptions] = None
    ) -> Page[TransactionResource]:
        """Get the first page of transactions across all accounts, newest first."""
        return self._request("GET", "/transactions", Page[TransactionResource], options=options)

    def get_transaction(self, transaction_id: str) -> Document[TransactionResource]:
        require_id(transaction_id, "transaction")
        return self._request(
            "GET", f"/transactions/{path_segment(transaction_id)}", Document[TransactionResource]
        )

    def list_transactions_by_account(
        self, account_id: str, options: Optional[ListTransactionsOptions] = None
    ) -> Page[TransactionResource]:
        require_id(account_id, "account")
        return self._request(
            "GET",
            f"/accounts/{path_segment(account_id)}/transactions",
            Page[TransactionResource],
            options=options,
        )

    # ----------------------------------------------------------- categories

    def list_categories(self, options: Optional[ListCategoriesOptions] = None) -> CategoryList:
        return self._request("GET", "/categories", CategoryList, options=options)

    def get_category(self, category_id: str) -> Document[CategoryResource]:
        require_id(category_id, "category")
        return self._request("GET", f"/categories/{path_segment(category_id)}", Document[CategoryResource])

    def categorize_transaction(self, transaction_id: str, category_id: Optional[str]) -> None:
        """Set the category of a transaction, or remove it when ``category_id`` is None."""
        require_id(transaction_id, "transaction")
        if category_id is not None:
            require_id(category_id, "category")
        self._request(
            "PATCH",
            f"/transactions/{path_segment(transaction_id)}/relationships/category",
            success_status=HTTP_NO_CONTENT,
            body=CategorizeTransactionRequest.for_category(category_id),
        )

    # ----------------------------------------------------------------- tags

    def list_tags(self, options: Optional[ListTagsOptions] = None) -> Page[TagResource]:
        return self._request("GET", "/tags", Page[TagResource], options=options)

    def add_tags(self, transaction_id: str, tags: List[str]) -> None:
        """Associate tags with a transaction, creating any that don't exist yet."""
        self._update_tags("POST", transaction_id, tags)

    def remove_tags(self, transaction_id: str, tags: List[str]) -> None:
        self._update_tags("DELETE", transaction_id, tags)

    def _update_tags(self, method: str, transaction_id: str, tags: List[str]) -> None:
        require_id(transaction_id, "transaction")
        if not tags:
            raise InvalidArgumentError("At least one tag must be provided.")
        for tag in tags:
            require_id(tag, "tag")
        self._request(
            method,
            f"/transactions/{path_segment(transaction_id)}/relationships/tags",
            success_status=HTTP_NO_CONTENT,
            body=UpdateTagsRequest.for_tags(tags),
        )

    # ------------------------------------------------------------- webhooks

    def list_webhooks(self, options: Optional[ListWebhooksOptions] = None) -> Page[WebhookResource]:
        return self._request("GET", "/webhooks", Page[WebhookResource], options=options)

    def get_webhook(self, webhook_id: str) -> Document[WebhookResource]:
        require_id(webhook_id, "webhook")
        return self._request("GET", f"/webhooks/{path_segment(webhook_id)}", Document[WebhookResource])

    def create_webhook(self, url: str, description: Optional[str] = None) -> Document[WebhookResource]:
        """Register a webhook. The returned resource is the only place the secret key appears."""
        if not url:
            raise InvalidArgumentError("The webhook URL must not be empty.")
        return self._request(
            "POST",
            "/webhooks",
            Document[WebhookResource],
            success_status=HTTP_CREATED,
            body=CreateWebhookRequest.for_url(url, description),
        )

    def delete_webhook(self, webhook_id: str) -> None:
        require_id(webhook_id, "webhook")
        self._request("DELETE", f"/webhooks/{path_segment(webhook_id)}", success_status=HTTP_NO_CONTENT)

    def ping_webhook(self, webhook_id: str) -> Document[WebhookEventResource]:
        """Ask the API to send a PING event to the webhook."""
        require_id(webhook_id, "webhook")
        return self._request(
            "POST",
            f"/webhooks/{path_segment(webhook_id)}/ping",
            Document[WebhookEventResource],
            success_status=HTTP_CREATED,
        )

    def list_webhook_logs(
        self, webhook_id: str, options: Optional[ListWebhookLogsOptions] = None
    ) -> Page[WebhookDeliveryLogResource]:
        require_id(webhook_id, "webhook")
        return self._request(
            "GET",
            f"/webhooks/{path_segment(webhook_id)}/logs",
            Page[WebhookDeliveryLogResource],
            options=options,
        )
