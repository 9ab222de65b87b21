"""
Use case: Create a new appeal.

Input: CreateAppealCommand (theme, message)
Output: AppealResult
Side effects: Persists a new appeal in status New.
Failure cases: AppealValidationError, AppealStorageError.
"""

import logging

from appeal_tracker.application.appeals.dtos import (
    AppealResult,
    CreateAppealCommand,
    to_appeal_result,
)
from appeal_tracker.domain.appeals.errors import AppealValidationError
from appeal_tracker.domain.appeals.ports import AppealRepository

logger = logging.getLogger(__name__)


class CreateAppealUseCase:
    """Orchestrates appeal creation.

    Rejects empty input, then delegates id and timestamp
    assignment to the repository.
    """

    def __init__(self, appeal_repo: AppealRepository) -> None:
        self._appeal_repo = appeal_repo

    def execute(self, command: CreateAppealCommand) -> AppealResult:
        """Run the create appeal use case.

        Args:
            command: Theme and message of the new appeal.

        Returns:
            The created appeal.

        Raises:
            AppealValidationError: If theme or message is empty.
        """
        if not command.theme or not command.theme.strip():
            raise AppealValidationError("theme", "theme is required")
        if not command.message or not command.message.strip():
            raise AppealValidationError("message", "message is required")

        appeal = self._appeal_repo.create(
            theme=command.theme,
            message=command.message,
        )
        logger.info("Created appeal id=%s", appeal.id)
        return to_appeal_result(appeal)
