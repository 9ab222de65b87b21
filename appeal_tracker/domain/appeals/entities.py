"""
Domain entities for the appeals bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class AppealStatus(Enum):
    """Lifecycle status of an appeal.

    New → InProgress → Completed, with cancellation allowed from the
    two active states and restart allowed from Cancelled.
    """

    NEW = "New"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


@dataclass(frozen=True)
class Appeal:
    """A support appeal tracked through its lifecycle.

    Attributes:
        id: Opaque identifier assigned by the repository at creation.
        theme: Short subject supplied at creation.
        message: Free-text body supplied at creation.
        status: Current lifecycle status.
        solution: Resolution text, empty until the appeal is completed.
        cancel_reason: Optional reason recorded on cancellation.
        created_at: Creation timestamp, never changes.
        updated_at: Refreshed on every successful mutation.
    """

    id: str
    theme: str
    message: str
    status: AppealStatus
    solution: str
    cancel_reason: str
    created_at: datetime
    updated_at: datetime

