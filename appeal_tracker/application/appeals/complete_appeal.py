"""
Use case: Complete an appeal with a solution.

Input: CompleteAppealCommand (appeal_id, solution)
Output: AppealResult
Side effects: Moves the appeal to Completed and stores the solution.
Failure cases: AppealValidationError, AppealNotFoundError,
    InvalidTransitionError, AppealConflictError.
"""

import logging
from dataclasses import replace

from appeal_tracker.application.appeals.dtos import (
    AppealResult,
    CompleteAppealCommand,
    to_appeal_result,
)
from appeal_tracker.domain.appeals.errors import AppealValidationError
from appeal_tracker.domain.appeals.lifecycle import AppealLifecycle, AppealOperation
from appeal_tracker.domain.appeals.ports import AppealRepository

logger = logging.getLogger(__name__)


class CompleteAppealUseCase:
    """Orchestrates the complete transition.

    Only an InProgress appeal can be completed, and a non-empty
    solution must be supplied.
    """

    def __init__(
        self, appeal_repo: AppealRepository, lifecycle: AppealLifecycle
    ) -> None:
        self._appeal_repo = appeal_repo
        self._lifecycle = lifecycle

    def execute(self, command: CompleteAppealCommand) -> AppealResult:
        """Run the complete appeal use case.

        Args:
            command: Appeal id and solution text.

        Returns:
            The completed appeal.

        Raises:
            AppealValidationError: If the solution is empty.
            AppealNotFoundError: If the appeal does not exist.
            InvalidTransitionError: If the appeal is not InProgress.
            AppealConflictError: If the appeal changed concurrently.
        """
        if not command.solution or not command.solution.strip():
            raise AppealValidationError("solution", "solution is required")

        appeal = self._appeal_repo.get(command.appeal_id)
        new_status = self._lifecycle.transition(
            appeal.status, AppealOperation.COMPLETE
        )

        updated = self._appeal_repo.update(
            replace(appeal, status=new_status, solution=command.solution),
            expected_status=appeal.status,
        )
        logger.info("Appeal id=%s completed", command.appeal_id)
        return to_appeal_result(updated)
