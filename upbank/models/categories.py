"""Pydantic models for Up categories."""

from typing import List, Optional

from pydantic import BaseModel, Field

from upbank.models.common import (
    ListOptions,
    OptionalToOneRelationship,
    ResourceIdentifier,
    SelfLink,
    ToManyRelationship,
    UpModel,
)


class CategoryAttributes(UpModel):
    name: str


class CategoryRelationships(UpModel):
    parent: OptionalToOneRelationship
    children: ToManyRelationship


class CategoryResource(UpModel):
    type: str
    id: str
    attributes: CategoryAttributes
    relationships: CategoryRelationships
    links: Optional[SelfLink] = None


class CategoryList(UpModel):
    """The category list is returned whole; it carries no pagination links."""

    data: List[CategoryResource]


class ListCategoriesOptions(ListOptions):
    parent: Optional[str] = Field(None, alias="filter[parent]")


class CategorizeTransactionRequest(BaseModel):
    """``data: null`` removes the category from the transaction."""

    data: Optional[ResourceIdentifier]

    @classmethod
    def for_category(cls, category_id: Optional[str]) -> "CategorizeTransactionRequest":
        if category_id is None:
            return cls(data=None)
        return cls(data=ResourceIdentifier(type="categories", id=category_id))
