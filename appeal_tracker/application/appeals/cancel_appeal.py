"""
Use case: Cancel a single appeal.

Input: CancelAppealCommand (appeal_id, optional reason)
Output: AppealResult
Side effects: Moves the appeal to Cancelled.
Failure cases: AppealNotFoundError, InvalidTransitionError, AppealConflictError.
"""

import logging
from dataclasses import replace

from appeal_tracker.application.appeals.dtos import (
    AppealResult,
    CancelAppealCommand,
    to_appeal_result,
)
from appeal_tracker.domain.appeals.lifecycle import AppealLifecycle, AppealOperation
from appeal_tracker.domain.appeals.ports import AppealRepository

logger = logging.getLogger(__name__)


class CancelAppealUseCase:
    """Orchestrates the cancel transition.

    Allowed from New and InProgress. A reason is recorded when given
    but is not required.
    """

    def __init__(
        self, appeal_repo: AppealRepository, lifecycle: AppealLifecycle
    ) -> None:
        self._appeal_repo = appeal_repo
        self._lifecycle = lifecycle

    def execute(self, command: CancelAppealCommand) -> AppealResult:
        """Run the cancel appeal use case.

        Args:
            command: Appeal id and optional reason.

        Returns:
            The cancelled appeal.

        Raises:
            AppealNotFoundError: If the appeal does not exist.
            InvalidTransitionError: If the appeal is Completed or already Cancelled.
            AppealConflictError: If the appeal changed concurrently.
        """
        appeal = self._appeal_repo.get(command.appeal_id)
        new_status = self._lifecycle.transition(
            appeal.status, AppealOperation.CANCEL
        )

        changes = {"status": new_status}
        if command.reason and command.reason.strip():
            changes["cancel_reason"] = command.reason

        updated = self._appeal_repo.update(
            replace(appeal, **changes),
            expected_status=appeal.status,
        )
        logger.info("Appeal id=%s cancelled", command.appeal_id)
        return to_appeal_result(updated)
