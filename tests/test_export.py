"""Tests for transaction export functionality."""

import csv
from unittest.mock import Mock

from upbank.export import COLUMN_NAMES, export_transactions_to_csv
from upbank.models import ListTransactionsOptions, TransactionResource
from upbank.pagination import Page, PageLinks


def make_page(transactions, next=None):
    return Page[TransactionResource](
        data=[TransactionResource.model_validate(t) for t in transactions],
        links=PageLinks(next=next),
    )


def read_rows(path):
    with open(path, 'r', encoding='utf-8') as csvfile:
        return list(csv.reader(csvfile))


def test_export_walks_every_page(tmp_path, make_transaction):
    """All pages are written, in order, after a single header."""
    first = make_page([make_transaction("t1"), make_transaction("t2")], next="https://api.up.com.au/api/v1/transactions?page[after]=x")
    second = make_page([make_transaction("t3", message="lunch")])

    client = Mock()
    client.list_transactions.return_value = first
    client.follow_link.return_value = second

    output_path = tmp_path / "out.csv"
    count = export_transactions_to_csv(client, output_path)

    assert count == 3
    rows = read_rows(output_path)
    assert rows[0] == COLUMN_NAMES
    assert [row[0] for row in rows[1:]] == ["t1", "t2", "t3"]
    client.follow_link.assert_called_once_with(
        "https://api.up.com.au/api/v1/transactions?page[after]=x", type(first)
    )

    t3 = dict(zip(COLUMN_NAMES, rows[3]))
    assert t3["message"] == "lunch"
    assert t3["amount"] == "-4.50"
    assert t3["currency"] == "AUD"
    assert t3["status"] == "SETTLED"
    assert t3["category"] == "restaurants-and-cafes"
    assert t3["parent_category"] == "good-life"
    assert t3["tags"] == "coffee"


def test_export_by_account_passes_filters(tmp_path, make_transaction):
    client = Mock()
    client.list_transactions_by_account.return_value = make_page([make_transaction("t1")])
    options = ListTransactionsOptions(page_size=100)

    export_transactions_to_csv(client, tmp_path / "out.csv", options=options, account_id="acc-1")

    client.list_transactions_by_account.assert_called_once_with("acc-1", options)
    client.list_transactions.assert_not_called()


def test_export_empty(tmp_path):
    client = Mock()
    client.list_transactions.return_value = make_page([])

    count = export_transactions_to_csv(client, tmp_path / "out.csv")

    assert count == 0
    assert read_rows(tmp_path / "out.csv") == [COLUMN_NAMES]


def test_export_default_path(isolated_home, make_transaction):
    client = Mock()
    client.list_transactions.return_value = make_page([make_transaction("t1")])

    export_transactions_to_csv(client)

    exported = list((isolated_home / "exports").glob("transactions-*.csv"))
    assert len(exported) == 1
