"""Envelope schemas shared by every endpoint: pagination meta and errors."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class MetaPagination(BaseModel):
    """``meta.pagination`` block of list responses."""

    model_config = ConfigDict(extra="allow")

    page: int = Field(..., description="Current page number (1-based)")
    per_page: int = Field(..., description="Entries per page")
    previous_page: int | None = Field(None, description="Previous page number, null on the first page")
    next_page: int | None = Field(None, description="Next page number, null on the last page")
    last_page: int = Field(..., description="Number of the last page")
    total_entries: int = Field(..., description="Total number of entries over all pages")


class Meta(BaseModel):
    """``meta`` block; absent on single-resource responses."""

    model_config = ConfigDict(extra="allow")

    pagination: MetaPagination | None = Field(None, description="Pagination info for list endpoints")


class Error(BaseModel):
    """Error object carried in non-2xx responses."""

    model_config = ConfigDict(extra="allow")

    code: str = Field(..., description="Machine readable error code (e.g., 'not_found')")
    message: str = Field("", description="Human readable error message")
    details: Any = Field(None, description="Code specific details (e.g., invalid fields)")


class ErrorResponse(BaseModel):
    """Body of a non-2xx response: ``{"error": {...}}``."""

    model_config = ConfigDict(extra="allow")

    error: Error
