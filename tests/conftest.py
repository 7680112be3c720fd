"""Shared fixtures: an isolated home directory and sample Up API payloads."""

import copy
from unittest.mock import patch

import pytest

from upbank.client import UpClient

BASE = "https://api.up.com.au/api/v1"
TOKEN = "up:yeah:testtoken123"

TRANSACTION = {
    "type": "transactions",
    "id": "txn-1",
    "attributes": {
        "status": "SETTLED",
        "rawText": "COFFEE CO SYDNEY",
        "description": "Coffee Co",
        "message": None,
        "isCategorizable": True,
        "holdInfo": {
            "amount": {"currencyCode": "AUD", "value": "-4.50", "valueInBaseUnits": -450},
            "foreignAmount": None,
        },
        "roundUp": None,
        "cashback": None,
        "amount": {"currencyCode": "AUD", "value": "-4.50", "valueInBaseUnits": -450},
        "foreignAmount": None,
        "cardPurchaseMethod": {"method": "CONTACTLESS", "cardNumberSuffix": "1234"},
        "settledAt": "2024-01-16T10:00:00+11:00",
        "createdAt": "2024-01-15T08:30:00+11:00",
        "someFutureField": "ignored",
    },
    "relationships": {
        "account": {
            "data": {"type": "accounts", "id": "acc-1"},
            "links": {"related": f"{BASE}/accounts/acc-1"},
        },
        "transferAccount": {"data": None},
        "category": {
            "data": {"type": "categories", "id": "restaurants-and-cafes"},
            "links": {
                "self": f"{BASE}/transactions/txn-1/relationships/category",
                "related": f"{BASE}/categories/restaurants-and-cafes",
            },
        },
        "parentCategory": {
            "data": {"type": "categories", "id": "good-life"},
            "links": {"related": f"{BASE}/categories/good-life"},
        },
        "tags": {
            "data": [{"type": "tags", "id": "coffee"}],
            "links": {"self": f"{BASE}/transactions/txn-1/relationships/tags"},
        },
    },
    "links": {"self": f"{BASE}/transactions/txn-1"},
}

ACCOUNT = {
    "type": "accounts",
    "id": "acc-1",
    "attributes": {
        "displayName": "Spending",
        "accountType": "TRANSACTIONAL",
        "ownershipType": "INDIVIDUAL",
        "balance": {"currencyCode": "AUD", "value": "1234.56", "valueInBaseUnits": 123456},
        "createdAt": "2020-02-01T09:00:00+11:00",
    },
    "relationships": {
        "transactions": {"links": {"related": f"{BASE}/accounts/acc-1/transactions"}},
    },
    "links": {"self": f"{BASE}/accounts/acc-1"},
}

WEBHOOK = {
    "type": "webhooks",
    "id": "wh-1",
    "attributes": {
        "url": "https://example.com/hook",
        "description": "my hook",
        "secretKey": "s3cr3t",
        "createdAt": "2024-02-01T12:00:00+11:00",
    },
    "relationships": {
        "logs": {"links": {"related": f"{BASE}/webhooks/wh-1/logs"}},
    },
    "links": {"self": f"{BASE}/webhooks/wh-1"},
}

NOT_FOUND = {
    "errors": [
        {
            "status": "404",
            "title": "Not Found",
            "detail": "The requested resource could not be found.",
            "source": None,
        }
    ]
}


@pytest.fixture(autouse=True)
def isolated_home(tmp_path):
    with patch("upbank.paths.get_upbank_home", return_value=tmp_path):
        yield tmp_path


@pytest.fixture
def client():
    return UpClient(TOKEN)


@pytest.fixture
def make_transaction():
    """Build a transaction payload with a given id and optional attribute overrides."""
    def _make(transaction_id="txn-1", **attributes):
        payload = copy.deepcopy(TRANSACTION)
        payload["id"] = transaction_id
        payload["attributes"].update(attributes)
        return payload
    return _make


@pytest.fixture
def account_payload():
    return copy.deepcopy(ACCOUNT)


@pytest.fixture
def webhook_payload():
    return copy.deepcopy(WEBHOOK)


@pytest.fixture
def not_found_payload():
    return copy.deepcopy(NOT_FOUND)
