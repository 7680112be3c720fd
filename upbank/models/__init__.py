"""upbank data models for API responses, requests and configuration."""

from .accounts import AccountResource, ListAccountsOptions
from .categories import CategoryList, CategoryResource, ListCategoriesOptions
from .common import (
    AccountType,
    Document,
    MoneyObject,
    OwnershipType,
    TransactionStatus,
    WebhookDeliveryStatus,
    WebhookEventType,
)
from .errors import ErrorObject, ErrorResponse, ErrorSource
from .tags import ListTagsOptions, TagResource
from .transactions import ListTransactionsOptions, TransactionResource
from .utilities import PingResponse
from .webhooks import (
    ListWebhookLogsOptions,
    ListWebhooksOptions,
    WebhookDeliveryLogResource,
    WebhookEventResource,
    WebhookResource,
)

__all__ = [
    "AccountResource",
    "AccountType",
    "CategoryList",
    "CategoryResource",
    "Document",
    "ErrorObject",
    "ErrorResponse",
    "ErrorSource",
    "ListAccountsOptions",
    "ListCategoriesOptions",
    "ListTagsOptions",
    "ListTransactionsOptions",
    "ListWebhookLogsOptions",
    "ListWebhooksOptions",
    "MoneyObject",
    "OwnershipType",
    "PingResponse",
    "TagResource",
    "TransactionResource",
    "TransactionStatus",
    "WebhookDeliveryLogResource",
    "WebhookDeliveryStatus",
    "WebhookEventResource",
    "WebhookEventType",
    "WebhookResource",
]
