"""Cursor pagination over Up API list responses.

Every paginated list endpoint decodes into ``Page[SomeResource]``. A page
carries absolute ``prev``/``next`` links; following one re-uses the client's
dispatcher and decoder and produces a new page of the same concrete type.
The page that produced it is never modified.
"""

from typing import TYPE_CHECKING, Generic, Iterator, List, Optional, TypeVar

from upbank.models.common import UpModel

if TYPE_CHECKING:
    from upbank.client import UpClient

T = TypeVar("T")


class PageLinks(UpModel):
    """Links to the neighbouring pages. ``None`` means there is no such page."""

    prev: Optional[str] = None
    next: Optional[str] = None


class Page(UpModel, Generic[T]):
    """One page of a paginated list response."""

    data: List[T]
    links: PageLinks

    @property
    def has_next(self) -> bool:
        return self.links.next is not None

    @property
    def has_previous(self) -> bool:
        return self.links.prev is not None

    def next_page(self, client: "UpClient") -> Optional["Page[T]"]:
        """Fetch the next page, or return None if this is the last one."""
        return self._follow(client, self.links.next)

    def previous_page(self, client: "UpClient") -> Optional["Page[T]"]:
        """Fetch the previous page, or return None if this is the first one."""
        return self._follow(client, self.links.prev)

    def iter_pages(self, client: "UpClient") -> Iterator["Page[T]"]:
        """Yield this page followed by every later page."""
        page: Optional[Page[T]] = self
        while page is not None:
            yield page
            page = page.next_page(client)

    def iter_items(self, client: "UpClient") -> Iterator[T]:
        """Yield every resource from this page onwards."""
        for page in self.iter_pages(client):
            yield from page.data

    def _follow(self, client: "UpClient", url: Optional[str]) -> Optional["Page[T]"]:
        if url is None:
            return None
        return client.follow_link(url, type(self))
