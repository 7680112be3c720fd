"""Pydantic models for Up transactions."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from upbank.models.common import (
    CardPurchaseMethodObject,
    CashbackObject,
    HoldInfoObject,
    ListOptions,
    MoneyObject,
    OptionalToOneRelationship,
    RoundUpObject,
    SelfLink,
    ToManyRelationship,
    ToOneRelationship,
    TransactionStatus,
    UpModel,
)


class TransactionAttributes(UpModel):
    status: TransactionStatus
    raw_text: Optional[str] = None
    description: str
    message: Optional[str] = None
    is_categorizable: bool
    hold_info: Optional[HoldInfoObject] = None
    round_up: Optional[RoundUpObject] = None
    cashback: Optional[CashbackObject] = None
    amount: MoneyObject
    foreign_amount: Optional[MoneyObject] = None
    card_purchase_method: Optional[CardPurchaseMethodObject] = None
    settled_at: Optional[datetime] = None
    created_at: datetime


class TransactionRelationships(UpModel):
    account: ToOneRelationship
    transfer_account: OptionalToOneRelationship
    category: OptionalToOneRelationship
    parent_category: OptionalToOneRelationship
    tags: ToManyRelationship


class TransactionResource(UpModel):
    """A movement of money into or out of an account."""

    type: str
    id: str
    attributes: TransactionAttributes
    relationships: TransactionRelationships
    links: Optional[SelfLink] = None

    @property
    def category_id(self) -> Optional[str]:
        category = self.relationships.category.data
        return category.id if category else None

    @property
    def parent_category_id(self) -> Optional[str]:
        parent = self.relationships.parent_category.data
        return parent.id if parent else None

    @property
    def tag_ids(self):
        return [tag.id for tag in self.relationships.tags.data]


class ListTransactionsOptions(ListOptions):
    page_size: Optional[int] = Field(None, alias="page[size]")
    status: Optional[TransactionStatus] = Field(None, alias="filter[status]")
    since: Optional[datetime] = Field(None, alias="filter[since]")
    until: Optional[datetime] = Field(None, alias="filter[until]")
    category: Optional[str] = Field(None, alias="filter[category]")
    tag: Optional[str] = Field(None, alias="filter[tag]")
