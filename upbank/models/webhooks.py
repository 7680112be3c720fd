"""Pydantic models for Up webhooks, webhook events and delivery logs."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from upbank.models.common import (
    LinksOnlyRelationship,
    ListOptions,
    SelfLink,
    ToOneRelationship,
    UpModel,
    WebhookDeliveryStatus,
    WebhookEventType,
)


class WebhookAttributes(UpModel):
    url: str
    description: Optional[str] = None
    # Only returned once, when the webhook is created
    secret_key: Optional[str] = None
    created_at: datetime


class WebhookRelationships(UpModel):
    logs: LinksOnlyRelationship


class WebhookResource(UpModel):
    type: str
    id: str
    attributes: WebhookAttributes
    relationships: WebhookRelationships
    links: Optional[SelfLink] = None


class WebhookEventAttributes(UpModel):
    event_type: WebhookEventType
    created_at: datetime


class WebhookEventRelationships(UpModel):
    webhook: ToOneRelationship
    transaction: Optional[ToOneRelationship] = None


class WebhookEventResource(UpModel):
    """An event sent to a webhook, e.g. the result of a ping."""

    type: str
    id: str
    attributes: WebhookEventAttributes
    relationships: WebhookEventRelationships


class DeliveryRequest(UpModel):
    body: str


class DeliveryResponse(UpModel):
    status_code: int
    body: str


class WebhookDeliveryLogAttributes(UpModel):
    request: DeliveryRequest
    response: Optional[DeliveryResponse] = None
    delivery_status: WebhookDeliveryStatus
    created_at: datetime


class WebhookDeliveryLogRelationships(UpModel):
    webhook_event: ToOneRelationship


class WebhookDeliveryLogResource(UpModel):
    type: str
    id: str
    attributes: WebhookDeliveryLogAttributes
    relationships: WebhookDeliveryLogRelationships


class ListWebhooksOptions(ListOptions):
    page_size: Optional[int] = Field(None, alias="page[size]")


class ListWebhookLogsOptions(ListOptions):
    page_size: Optional[int] = Field(None, alias="page[size]")


class WebhookInputAttributes(BaseModel):
    url: str
    description: Optional[str] = None


class WebhookInputResource(BaseModel):
    attributes: WebhookInputAttributes


class CreateWebhookRequest(BaseModel):
    data: WebhookInputResource

    @classmethod
    def for_url(cls, url: str, description: Optional[str] = None) -> "CreateWebhookRequest":
        attributes = WebhookInputAttributes(url=url, description=description)
        return cls(data=WebhookInputResource(attributes=attributes))
