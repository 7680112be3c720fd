"""Individual credential models for validation."""

from pydantic import BaseModel, Field


class AccessToken(BaseModel):
    """Up personal access token."""
    value: str = Field(pattern=r"^up:yeah:[A-Za-z0-9]+$")
