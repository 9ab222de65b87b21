"""
Domain service: Appeal lifecycle rules.

Pure decision logic over an appeal's current status and a requested
operation. No framework imports. No IO. No state.

Transitions:
    start-processing   New, Cancelled      → InProgress
    complete           InProgress          → Completed
    cancel             New, InProgress     → Cancelled

Completed has no outgoing edge. Cancelled can be restarted.
"""

from enum import Enum

from appeal_tracker.domain.appeals.entities import AppealStatus
from appeal_tracker.domain.appeals.errors import InvalidTransitionError


class AppealOperation(Enum):
    """A user-facing operation that changes an appeal's status."""

    START_PROCESSING = "start-processing"
    COMPLETE = "complete"
    CANCEL = "cancel"


ACTIVE_STATUSES: frozenset[AppealStatus] = frozenset(
    {AppealStatus.NEW, AppealStatus.IN_PROGRESS}
)

_ALLOWED_SOURCES: dict[AppealOperation, frozenset[AppealStatus]] = {
    AppealOperation.START_PROCESSING: frozenset(
        {AppealStatus.NEW, AppealStatus.CANCELLED}
    ),
    AppealOperation.COMPLETE: frozenset({AppealStatus.IN_PROGRESS}),
    AppealOperation.CANCEL: ACTIVE_STATUSES,
}

_RESULTING_STATUS: dict[AppealOperation, AppealStatus] = {
    AppealOperation.START_PROCESSING: AppealStatus.IN_PROGRESS,
    AppealOperation.COMPLETE: AppealStatus.COMPLETED,
    AppealOperation.CANCEL: AppealStatus.CANCELLED,
}


class AppealLifecycle:
    """State machine for appeal status transitions.

    This is pure business logic: a lookup over (status, operation).
    It holds no state, so a single instance can be shared freely.
    """

    def can_apply(self, status: AppealStatus, operation: AppealOperation) -> bool:
        """Return True if ``operation`` is legal from ``status``."""
        return status in _ALLOWED_SOURCES[operation]

    def transition(
        self, status: AppealStatus, operation: AppealOperation
    ) -> AppealStatus:
        """Return the status that results from applying ``operation``.

        Args:
            status: The appeal's current status.
            operation: The requested operation.

        Returns:
            The resulting status.

        Raises:
            InvalidTransitionError: If the operation is not allowed from ``status``.
        """
        if not self.can_apply(status, operation):
            raise InvalidTransitionError(status.value, operation.value)
        return _RESULTING_STATUS[operation]
