"""Pydantic models for Up tags."""

from typing import List, Optional

from pydantic import BaseModel, Field

from upbank.models.common import LinksOnlyRelationship, ListOptions, ResourceIdentifier, UpModel


class TagRelationships(UpModel):
    transactions: LinksOnlyRelationship


class TagResource(UpModel):
    """A tag; its id is the tag label itself."""

    type: str
    id: str
    relationships: TagRelationships


class ListTagsOptions(ListOptions):
    page_size: Optional[int] = Field(None, alias="page[size]")


class UpdateTagsRequest(BaseModel):
    data: List[ResourceIdentifier]

    @classmethod
    def for_tags(cls, tags: List[str]) -> "UpdateTagsRequest":
        return cls(data=[ResourceIdentifier(type="tags", id=tag) for tag in tags])
