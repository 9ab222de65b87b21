"""
Pydantic schemas for appeals API request/response validation.

These schemas enforce input validation and define the API contract.
No business logic belongs here.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class CreateAppealRequest(BaseModel):
    """Request schema for appeal creation.

    Attributes:
        theme: Appeal subject.
        message: Appeal body.
    """

    theme: str = Field(..., min_length=1, description="Appeal subject")
    message: str = Field(..., min_length=1, description="Appeal body")


class CompleteAppealRequest(BaseModel):
    """Request schema for completing an appeal."""

    solution: str = Field(..., min_length=1, description="Resolution text")


class CancelAppealRequest(BaseModel):
    """Request schema for cancelling an appeal. The body is optional."""

    reason: str | None = Field(default=None, description="Cancellation reason")


class AppealItem(BaseModel):
    """A single appeal in a response."""

    id: str
    theme: str
    message: str
    status: str
    solution: str
    cancel_reason: str
    created_at: datetime
    updated_at: datetime


class AppealListResponse(BaseModel):
    """Response schema for every listing endpoint."""

    appeals: list[AppealItem]


class AppealResponse(BaseModel):
    """Response schema for a single appeal lookup."""

    appeal: AppealItem


class AppealActionResponse(BaseModel):
    """Response schema for create, start and complete."""

    message: str
    appeal: AppealItem


class AppealCancelledResponse(BaseModel):
    """Response schema for single appeal cancellation."""

    message: str
    id: str


class BulkCancelResponse(BaseModel):
    """Response schema for bulk cancellation."""

    message: str
    cancelled: int


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    store: str


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
    detail: str | None = None
