"""Pydantic models for Up accounts."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from upbank.models.common import (
    AccountType,
    LinksOnlyRelationship,
    ListOptions,
    MoneyObject,
    OwnershipType,
    SelfLink,
    UpModel,
)


class AccountAttributes(UpModel):
    display_name: str
    account_type: AccountType
    ownership_type: OwnershipType
    balance: MoneyObject
    created_at: datetime


class AccountRelationships(UpModel):
    transactions: LinksOnlyRelationship


class AccountResource(UpModel):
    """An Up account (spending, saver or home loan)."""

    type: str
    id: str
    attributes: AccountAttributes
    relationships: AccountRelationships
    links: Optional[SelfLink] = None


class ListAccountsOptions(ListOptions):
    page_size: Optional[int] = Field(None, alias="page[size]")
    account_type: Optional[AccountType] = Field(None, alias="filter[accountType]")
    ownership_type: Optional[OwnershipType] = Field(None, alias="filter[ownershipType]")
