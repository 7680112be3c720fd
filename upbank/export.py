"""Transaction export functionality for upbank."""

import csv
from datetime import datetime
from pathlib import Path
from typing import Optional

from upbank.client import UpClient
from upbank.logger import get_logger
from upbank.models.transactions import ListTransactionsOptions, TransactionResource
from upbank.paths import get_default_exports_dir

logger = get_logger("upbank.export")

COLUMN_NAMES = [
    'id', 'created_at', 'settled_at', 'status', 'description', 'message',
    'amount', 'currency', 'category', 'parent_category', 'tags'
]


def transaction_row(transaction: TransactionResource) -> list:
    """Flatten a transaction into one CSV row matching COLUMN_NAMES."""
    attributes = transaction.attributes
    return [
        transaction.id,
        attributes.created_at.isoformat(),
        attributes.settled_at.isoformat() if attributes.settled_at else "",
        attributes.status.value,
        attributes.description,
        attributes.message or "",
        str(attributes.amount.value),
        attributes.amount.currency_code,
        transaction.category_id or "",
        transaction.parent_category_id or "",
        ";".join(transaction.tag_ids),
    ]


def export_transactions_to_csv(
    client: UpClient,
    output_path=None,
    options: Optional[ListTransactionsOptions] = None,
    account_id: Optional[str] = None,
) -> int:
    """Export every matching transaction to a CSV file. Returns the row count."""
    if output_path is None:
        output_path = get_default_exports_dir() / f"transactions-{datetime.now().strftime('%Y-%m-%d-%H%M%S')}.csv"
    output_path = Path(output_path)

    logger.info(f"Starting export to {output_path}")

    if account_id:
        first_page = client.list_transactions_by_account(account_id, options)
    else:
        first_page = client.list_transactions(options)

    count = 0
    with open(output_path, 'w', newline='', encoding='utf-8') as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(COLUMN_NAMES)

        for page_number, page in enumerate(first_page.iter_pages(client), 1):
            logger.debug(f"Writing page {page_number} ({len(page.data)} transaction(s))")
            for transaction in page.data:
                writer.writerow(transaction_row(transaction))
                count += 1

    if count == 0:
        logger.warning("No transactions found to export.")
    else:
        logger.info(f"Exported {count} transaction(s) to {output_path}")
    return count
