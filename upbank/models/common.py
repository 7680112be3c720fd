"""Shared building blocks for Up API resource models."""

from decimal import Decimal
from enum import Enum
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class UpModel(BaseModel):
    """Base for decoded API payloads: camelCase on the wire, immutable, extra fields ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class Document(UpModel, Generic[T]):
    """Single-resource response: ``{"data": {...}}``."""

    data: T


class ResourceIdentifier(UpModel):
    """Reference to another resource by type and id."""

    type: str
    id: str


class RelatedLinks(UpModel):
    related: str


class SelfLink(UpModel):
    self_link: Optional[str] = Field(None, alias="self")


class SelfAndRelatedLinks(UpModel):
    self_link: Optional[str] = Field(None, alias="self")
    related: Optional[str] = None


class ToOneRelationship(UpModel):
    """Relationship that always points at exactly one resource."""

    data: ResourceIdentifier
    links: Optional[RelatedLinks] = None


class OptionalToOneRelationship(UpModel):
    """Relationship that may be empty (``data: null``)."""

    data: Optional[ResourceIdentifier] = None
    links: Optional[SelfAndRelatedLinks] = None


class ToManyRelationship(UpModel):
    data: List[ResourceIdentifier]
    links: Optional[SelfAndRelatedLinks] = None


class LinksOnlyRelationship(UpModel):
    links: Optional[RelatedLinks] = None


class MoneyObject(UpModel):
    """An amount of money in a given currency."""

    currency_code: str
    value: Decimal
    value_in_base_units: int


class AccountType(str, Enum):
    SAVER = "SAVER"
    TRANSACTIONAL = "TRANSACTIONAL"
    HOME_LOAN = "HOME_LOAN"


class OwnershipType(str, Enum):
    INDIVIDUAL = "INDIVIDUAL"
    JOINT = "JOINT"


class TransactionStatus(str, Enum):
    HELD = "HELD"
    SETTLED = "SETTLED"


class CardPurchaseMethod(str, Enum):
    BAR_CODE = "BAR_CODE"
    OCR = "OCR"
    CARD_PIN = "CARD_PIN"
    CARD_DETAILS = "CARD_DETAILS"
    CARD_ON_FILE = "CARD_ON_FILE"
    ECOMMERCE = "ECOMMERCE"
    MAGNETIC_STRIPE = "MAGNETIC_STRIPE"
    CONTACTLESS = "CONTACTLESS"


class WebhookEventType(str, Enum):
    TRANSACTION_CREATED = "TRANSACTION_CREATED"
    TRANSACTION_SETTLED = "TRANSACTION_SETTLED"
    TRANSACTION_DELETED = "TRANSACTION_DELETED"
    PING = "PING"


class WebhookDeliveryStatus(str, Enum):
    DELIVERED = "DELIVERED"
    UNDELIVERABLE = "UNDELIVERABLE"
    BAD_RESPONSE_CODE = "BAD_RESPONSE_CODE"


class HoldInfoObject(UpModel):
    """Amounts of a transaction while it was in the ``HELD`` status."""

    amount: MoneyObject
    foreign_amount: Optional[MoneyObject] = None


class RoundUpObject(UpModel):
    amount: MoneyObject
    boost_portion: Optional[MoneyObject] = None


class CashbackObject(UpModel):
    description: str
    amount: MoneyObject


class CardPurchaseMethodObject(UpModel):
    method: CardPurchaseMethod
    card_number_suffix: Optional[str] = None


class ListOptions(BaseModel):
    """Base for list-endpoint filters.

    Each field's alias is its wire name (``page[size]``, ``filter[...]``) and
    the field declaration order is the order parameters appear in the URL.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def query_params(self):
        """Return ``(wire_name, value)`` pairs in declaration order."""
        return [
            (field.alias or name, getattr(self, name))
            for name, field in type(self).model_fields.items()
        ]
