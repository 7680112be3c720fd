"""Pydantic models for the Up utility endpoints."""

from upbank.models.common import UpModel


class PingMeta(UpModel):
    id: str  # unique identifier of the authenticated customer
    status_emoji: str


class PingResponse(UpModel):
    meta: PingMeta
