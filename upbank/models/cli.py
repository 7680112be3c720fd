"""CLI parameter models with Pydantic validation."""

from datetime import date, datetime, time
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from upbank.models.common import TransactionStatus
from upbank.models.transactions import ListTransactionsOptions


class TransactionQueryParams(BaseModel):
    """Parameters for the transactions and export commands.

    Attributes:
        since: Only include transactions on or after this date
        until: Only include transactions before this date
        status: HELD or SETTLED
        category: Category id filter
        tag: Tag filter
        page_size: Number of records per page
    """

    since: Optional[date] = Field(default=None)
    until: Optional[date] = Field(default=None)
    status: Optional[TransactionStatus] = Field(default=None)
    category: Optional[str] = Field(default=None)
    tag: Optional[str] = Field(default=None)
    page_size: Optional[int] = Field(default=None, ge=1)

    @field_validator('since', 'until')
    @classmethod
    def validate_date_not_future(cls, v):
        """Ensure dates are not in the future."""
        if v is not None and v > date.today():
            raise ValueError(
                f"date cannot be in the future. Got {v}, today is {date.today()}"
            )
        return v

    @model_validator(mode='after')
    def validate_range(self):
        if self.since and self.until and self.since > self.until:
            raise ValueError(f"since ({self.since}) must not be after until ({self.until})")
        return self

    def to_options(self) -> ListTransactionsOptions:
        """Convert to API filters, using local midnight as the date boundary."""
        return ListTransactionsOptions(
            page_size=self.page_size,
            status=self.status,
            since=_local_midnight(self.since),
            until=_local_midnight(self.until),
            category=self.category,
            tag=self.tag,
        )


def _local_midnight(value: Optional[date]) -> Optional[datetime]:
    if value is None:
        return None
    return datetime.combine(value, time.min).astimezone()
