"""
Data Transfer Objects for the appeals application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from datetime import date, datetime

from appeal_tracker.domain.appeals.entities import Appeal


@dataclass(frozen=True)
class CreateAppealCommand:
    """Input DTO for creating an appeal.

    Attributes:
        theme: Appeal subject, must not be empty.
        message: Appeal body, must not be empty.
    """

    theme: str
    message: str


@dataclass(frozen=True)
class CompleteAppealCommand:
    """Input DTO for completing an appeal.

    Attributes:
        appeal_id: Identifier of the appeal to complete.
        solution: Resolution text, must not be empty.
    """

    appeal_id: str
    solution: str


@dataclass(frozen=True)
class CancelAppealCommand:
    """Input DTO for cancelling an appeal.

    Attributes:
        appeal_id: Identifier of the appeal to cancel.
        reason: Optional cancellation reason.
    """

    appeal_id: str
    reason: str | None = None


@dataclass(frozen=True)
class ListAppealsByDateRangeQuery:
    """Input DTO for a calendar-day range query.

    Attributes:
        start_date: First day of the range (inclusive).
        end_date: Last day of the range (inclusive, whole day).
    """

    start_date: date
    end_date: date


@dataclass(frozen=True)
class AppealResult:
    """Output DTO for a single appeal."""

    id: str
    theme: str
    message: str
    status: str
    solution: str
    cancel_reason: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class BulkCancelResult:
    """Output DTO for the bulk cancellation use case.

    Attributes:
        cancelled: Number of appeals moved to Cancelled.
    """

    cancelled: int


def to_appeal_result(appeal: Appeal) -> AppealResult:
    """Map an Appeal entity to its output DTO."""
    return AppealResult(
        id=appeal.id,
        theme=appeal.theme,
        message=appeal.message,
        status=appeal.status.value,
        solution=appeal.solution,
        cancel_reason=appeal.cancel_reason,
        created_at=appeal.created_at,
        updated_at=appeal.updated_at,
    )
