"""
Pydantic models for FastAPI requests and responses.

This module contains the accepted query parameter models and the
error and health response models for the mock API.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ================================
# QUERY PARAMETER MODELS
# ================================


class QueryParams(BaseModel):
    """Dashboard filter parameters. Accepted, recorded, never applied."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    store_ids: str | None = Field(
        None, description="Comma-separated store ids", examples=["ST001,ST002"]
    )
    region: str | None = Field(None, description="Region name")
    store_type: str | None = Field(None, description="Store type")

    def provided(self) -> dict[str, str]:
        """Parameters the client actually sent."""
        return self.model_dump(by_alias=True, exclude_none=True)


class SalesQueryParams(QueryParams):
    """Filter parameters accepted by the sales endpoint."""

    start_date: str | None = Field(
        None, description="Range start (YYYY-MM-DD)", examples=["2023-01-01"]
    )
    end_date: str | None = Field(
        None, description="Range end (YYYY-MM-DD)", examples=["2023-03-31"]
    )


class InventoryQueryParams(QueryParams):
    """Filter parameters accepted by the inventory endpoint."""


# ================================
# RESPONSE MODELS
# ================================


class HealthCheckResponse(BaseModel):
    """Response model for health checks."""

    status: str = Field(..., description="Overall health status")
    timestamp: datetime = Field(..., description="Health check timestamp")
    version: str = Field(..., description="Application version")
    checks: dict[str, dict[str, Any]] = Field(
        ..., description="Individual component health checks"
    )


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str = Field(..., description="Error type or code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] | None = Field(None, description="Additional error details")
    timestamp: datetime = Field(..., description="Error timestamp")


class ValidationErrorResponse(BaseModel):
    """Response model for validation errors."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="General error message")
    field_errors: list[dict[str, Any]] = Field(
        ..., description="Detailed field validation errors"
    )
    timestamp: datetime = Field(..., description="Error timestamp")
