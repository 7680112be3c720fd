"""Pydantic models for the Up API error envelope."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorSource(BaseModel):
    """Location in the request that an error relates to."""

    model_config = ConfigDict(frozen=True)

    parameter: Optional[str] = None  # query parameter name
    pointer: Optional[str] = None  # RFC 6901 pointer into the request body


class ErrorObject(BaseModel):
    """A single error entry."""

    model_config = ConfigDict(frozen=True)

    status: str
    title: str
    detail: str
    source: Optional[ErrorSource] = None


class ErrorResponse(BaseModel):
    """Body returned by the API alongside a non-success status."""

    model_config = ConfigDict(frozen=True)

    errors: List[ErrorObject] = Field(min_length=1)
