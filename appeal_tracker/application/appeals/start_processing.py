"""
Use case: Start processing an appeal.

Input: appeal id
Output: AppealResult
Side effects: Moves the appeal to InProgress.
Failure cases: AppealNotFoundError, InvalidTransitionError, AppealConflictError.
"""

import logging
from dataclasses import replace

from appeal_tracker.application.appeals.dtos import AppealResult, to_appeal_result
from appeal_tracker.domain.appeals.lifecycle import AppealLifecycle, AppealOperation
from appeal_tracker.domain.appeals.ports import AppealRepository

logger = logging.getLogger(__name__)


class StartProcessingUseCase:
    """Orchestrates the start-processing transition.

    Allowed from New and from Cancelled (a cancelled appeal may be reopened).
    The write is conditional on the status that was read.
    """

    def __init__(
        self, appeal_repo: AppealRepository, lifecycle: AppealLifecycle
    ) -> None:
        self._appeal_repo = appeal_repo
        self._lifecycle = lifecycle

    def execute(self, appeal_id: str) -> AppealResult:
        """Run the start processing use case.

        Args:
            appeal_id: Identifier of the appeal.

        Returns:
            The updated appeal.

        Raises:
            AppealNotFoundError: If the appeal does not exist.
            InvalidTransitionError: If the appeal is InProgress or Completed.
            AppealConflictError: If the appeal changed concurrently.
        """
        appeal = self._appeal_repo.get(appeal_id)
        new_status = self._lifecycle.transition(
            appeal.status, AppealOperation.START_PROCESSING
        )

        updated = self._appeal_repo.update(
            replace(appeal, status=new_status),
            expected_status=appeal.status,
        )
        logger.info(
            "Appeal id=%s moved %s -> %s",
            appeal_id,
            appeal.status.value,
            updated.status.value,
        )
        return to_appeal_result(updated)
