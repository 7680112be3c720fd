#!/usr/bin/env python3
"""upbank CLI - command line access to the Up Bank API."""

import argparse
import sys
from typing import Optional

from pydantic import ValidationError

import upbank.credentials as credentials
from upbank.client import UpClient
from upbank.errors import (
    ApiError,
    DecodeError,
    EncodeError,
    InvalidArgumentError,
    InvalidURLError,
    TransportError,
)
from upbank.export import export_transactions_to_csv
from upbank.logger import get_logger
from upbank.models.accounts import ListAccountsOptions
from upbank.models.categories import ListCategoriesOptions
from upbank.models.cli import TransactionQueryParams
from upbank.models.config import Config
from upbank.models.tags import ListTagsOptions
from upbank.models.webhooks import ListWebhookLogsOptions, ListWebhooksOptions

logger = get_logger()


def exit_with_auth_error(message: str) -> None:
    """Exit with error message and auth instruction."""
    logger.error(message)
    logger.error("Please run 'upbank auth' to set up your access token.")
    sys.exit(1)


def exit_with_validation_error(heading: str, error: ValidationError) -> None:
    logger.error(heading)
    for detail in error.errors():
        field = ".".join(str(part) for part in detail['loc']) or "value"
        logger.error(f"  {field}: {detail['msg']}")
    sys.exit(1)


def setup_credentials() -> bool:
    """Prompt for and store the personal access token."""
    logger.info("upbank credential setup")
    logger.info("=" * 25)

    current = credentials.get_access_token()
    current_str = current.value if current else None

    prompt = f"Up access token (current: {credentials.mask(current_str, 6)}): " if current_str else "Up access token (up:yeah:xxx): "
    token = input(prompt).strip() or current_str

    if not token:
        logger.error("An access token is required")
        return False

    try:
        credentials.set_access_token(token)
    except ValidationError as e:
        exit_with_validation_error("Invalid access token:", e)

    logger.info("Access token stored successfully")
    return True


def load_client(config: Optional[Config] = None) -> UpClient:
    """Build a client from stored configuration."""
    if config is None:
        config = load_config()
    return config.client()


def load_config() -> Config:
    try:
        token = credentials.get_access_token()
    except ValidationError as e:
        exit_with_validation_error("Invalid access token:", e)
    if token is None:
        exit_with_auth_error("Access token not found in keyring or UP_ACCESS_TOKEN")
    try:
        return Config.load()
    except ValidationError as e:
        exit_with_validation_error("Invalid configuration:", e)


def page_size(args, config: Config) -> Optional[int]:
    return args.page_size if args.page_size is not None else config.page_size


def log_pages(first_page, client: UpClient, walk_all: bool, describe) -> int:
    """Log each resource of the first page, or of every page with --all."""
    pages = first_page.iter_pages(client) if walk_all else [first_page]
    count = 0
    for page in pages:
        for item in page.data:
            logger.info(describe(item))
            count += 1
    if not walk_all and first_page.has_next:
        logger.info("More results available (use --all to fetch every page)")
    return count


def describe_account(account) -> str:
    a = account.attributes
    return f"{account.id}  {a.display_name:<24} {a.account_type.value:<13} {a.balance.value:>12} {a.balance.currency_code}"


def describe_transaction(transaction) -> str:
    a = transaction.attributes
    return f"{transaction.id}  {a.created_at:%Y-%m-%d}  {a.status.value:<7} {a.amount.value:>10} {a.amount.currency_code}  {a.description}"


def describe_webhook(webhook) -> str:
    a = webhook.attributes
    return f"{webhook.id}  {a.url}  {a.description or ''}"


def describe_delivery_log(log) -> str:
    a = log.attributes
    status_code = a.response.status_code if a.response else "-"
    return f"{log.id}  {a.created_at:%Y-%m-%d %H:%M:%S}  {a.delivery_status.value:<17} {status_code}"


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="upbank - Query and manage your Up Bank data"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("auth", help="Store your Up personal access token")
    subparsers.add_parser("ping", help="Check that the access token works")

    def add_paging(sub):
        sub.add_argument("--page-size", type=int, metavar="N", help="Records per page")
        sub.add_argument("--all", action="store_true", help="Fetch every page")

    def add_transaction_filters(sub):
        sub.add_argument("--account", metavar="ID", help="Only transactions for this account")
        sub.add_argument("--status", choices=["HELD", "SETTLED"], help="Transaction status")
        sub.add_argument("--since", metavar="YYYY-MM-DD", help="Only transactions from this date onwards")
        sub.add_argument("--until", metavar="YYYY-MM-DD", help="Only transactions before this date")
        sub.add_argument("--category", metavar="ID", help="Category id, e.g. groceries")
        sub.add_argument("--tag", help="Tag label")

    accounts_parser = subparsers.add_parser("accounts", help="List accounts")
    accounts_parser.add_argument("--type", choices=["SAVER", "TRANSACTIONAL", "HOME_LOAN"], help="Account type")
    accounts_parser.add_argument("--ownership", choices=["INDIVIDUAL", "JOINT"], help="Ownership type")
    add_paging(accounts_parser)

    transactions_parser = subparsers.add_parser("transactions", help="List transactions")
    add_transaction_filters(transactions_parser)
    add_paging(transactions_parser)

    categories_parser = subparsers.add_parser("categories", help="List categories")
    categories_parser.add_argument("--parent", metavar="ID", help="Only children of this category")

    tags_parser = subparsers.add_parser("tags", help="List tags")
    add_paging(tags_parser)

    tag_parser = subparsers.add_parser("tag", help="Add or remove tags on a transaction")
    tag_parser.add_argument("transaction_id")
    tag_parser.add_argument("tags", nargs="+")
    tag_parser.add_argument("--remove", action="store_true", help="Remove the tags instead of adding them")

    categorize_parser = subparsers.add_parser("categorize", help="Set or clear a transaction's category")
    categorize_parser.add_argument("transaction_id")
    categorize_parser.add_argument("category_id", nargs="?", help="Omit to remove the category")

    webhooks_parser = subparsers.add_parser("webhooks", help="Manage webhooks")
    webhooks_parser.set_defaults(page_size=None, all=False)
    webhook_commands = webhooks_parser.add_subparsers(dest="webhook_command", help="Webhook commands")
    webhook_list = webhook_commands.add_parser("list", help="List webhooks")
    add_paging(webhook_list)
    webhook_create = webhook_commands.add_parser("create", help="Register a webhook URL")
    webhook_create.add_argument("url")
    webhook_create.add_argument("--description", help="Short description of the webhook")
    webhook_delete = webhook_commands.add_parser("delete", help="Delete a webhook")
    webhook_delete.add_argument("webhook_id")
    webhook_ping = webhook_commands.add_parser("ping", help="Send a PING event to a webhook")
    webhook_ping.add_argument("webhook_id")
    webhook_logs = webhook_commands.add_parser("logs", help="List delivery logs for a webhook")
    webhook_logs.add_argument("webhook_id")
    add_paging(webhook_logs)

    export_parser = subparsers.add_parser("export", help="Export transactions to CSV")
    export_parser.add_argument(
        "-o", "--output",
        help="Output filename (default: ~/.upbank/exports/transactions-YYYY-MM-DD-HHMMSS.csv)"
    )
    export_parser.add_argument("--page-size", type=int, metavar="N", help="Records per page")
    add_transaction_filters(export_parser)

    return parser


def transaction_params(args, config: Config) -> TransactionQueryParams:
    try:
        return TransactionQueryParams(
            since=args.since,
            until=args.until,
            status=args.status,
            category=args.category,
            tag=args.tag,
            page_size=page_size(args, config),
        )
    except ValidationError as e:
        exit_with_validation_error("Invalid transaction filters:", e)


def cmd_auth():
    """Store the access token and verify it with a ping."""
    if not setup_credentials():
        sys.exit(1)
    cmd_ping()


def cmd_ping():
    response = load_client().ping()
    logger.info(f"{response.meta.status_emoji} Authenticated as {response.meta.id}")


def cmd_accounts(args):
    config = load_config()
    client = config.client()
    options = ListAccountsOptions(
        page_size=page_size(args, config),
        account_type=args.type,
        ownership_type=args.ownership,
    )
    log_pages(client.list_accounts(options), client, args.all, describe_account)


def cmd_transactions(args):
    config = load_config()
    client = config.client()
    options = transaction_params(args, config).to_options()
    if args.account:
        first_page = client.list_transactions_by_account(args.account, options)
    else:
        first_page = client.list_transactions(options)
    count = log_pages(first_page, client, args.all, describe_transaction)
    logger.debug(f"Listed {count} transaction(s)")


def cmd_categories(args):
    client = load_client()
    categories = client.list_categories(ListCategoriesOptions(parent=args.parent))
    for category in categories.data:
        parent = category.relationships.parent.data
        suffix = f"  (parent: {parent.id})" if parent else ""
        logger.info(f"{category.id:<32} {category.attributes.name}{suffix}")


def cmd_tags(args):
    config = load_config()
    client = config.client()
    options = ListTagsOptions(page_size=page_size(args, config))
    log_pages(client.list_tags(options), client, args.all, lambda tag: tag.id)


def cmd_tag(args):
    client = load_client()
    if args.remove:
        client.remove_tags(args.transaction_id, args.tags)
        logger.info(f"Removed {len(args.tags)} tag(s) from {args.transaction_id}")
    else:
        client.add_tags(args.transaction_id, args.tags)
        logger.info(f"Added {len(args.tags)} tag(s) to {args.transaction_id}")


def cmd_categorize(args):
    client = load_client()
    client.categorize_transaction(args.transaction_id, args.category_id)
    if args.category_id:
        logger.info(f"Categorized {args.transaction_id} as {args.category_id}")
    else:
        logger.info(f"Removed category from {args.transaction_id}")


def cmd_webhooks(args):
    config = load_config()
    client = config.client()
    command = args.webhook_command or "list"

    if command == "list":
        options = ListWebhooksOptions(page_size=page_size(args, config))
        log_pages(client.list_webhooks(options), client, args.all, describe_webhook)
    elif command == "create":
        webhook = client.create_webhook(args.url, args.description).data
        logger.info(f"Created webhook {webhook.id} for {webhook.attributes.url}")
        if webhook.attributes.secret_key:
            logger.info(f"Secret key (shown only once): {webhook.attributes.secret_key}")
    elif command == "delete":
        client.delete_webhook(args.webhook_id)
        logger.info(f"Deleted webhook {args.webhook_id}")
    elif command == "ping":
        event = client.ping_webhook(args.webhook_id).data
        logger.info(f"Sent {event.attributes.event_type.value} event {event.id}")
    elif command == "logs":
        options = ListWebhookLogsOptions(page_size=page_size(args, config))
        log_pages(client.list_webhook_logs(args.webhook_id, options), client, args.all, describe_delivery_log)


def cmd_export(args):
    config = load_config()
    client = config.client()
    options = transaction_params(args, config).to_options()
    export_transactions_to_csv(client, args.output, options=options, account_id=args.account)


def run(args) -> None:
    commands = {
        "auth": lambda: cmd_auth(),
        "ping": lambda: cmd_ping(),
        "accounts": lambda: cmd_accounts(args),
        "transactions": lambda: cmd_transactions(args),
        "categories": lambda: cmd_categories(args),
        "tags": lambda: cmd_tags(args),
        "tag": lambda: cmd_tag(args),
        "categorize": lambda: cmd_categorize(args),
        "webhooks": lambda: cmd_webhooks(args),
        "export": lambda: cmd_export(args),
    }

    try:
        commands[args.command]()
    except ApiError as e:
        logger.error(f"Up API rejected the request ({e.status_code}):")
        for error in e.errors:
            logger.error(f"  {error.title}: {error.detail}")
        sys.exit(1)
    except (DecodeError, EncodeError) as e:
        logger.error(f"Unexpected API payload, please report this as a bug: {e}")
        sys.exit(1)
    except (TransportError, InvalidURLError) as e:
        logger.error(f"Could not reach the Up API: {e}")
        sys.exit(1)
    except InvalidArgumentError as e:
        logger.error(str(e))
        sys.exit(1)


def main():
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return

    run(args)


if __name__ == "__main__":
    main()
