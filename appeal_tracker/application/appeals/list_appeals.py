"""
Use cases: List appeals.

Input: None
Output: list[AppealResult]
Side effects: None (read-only queries).
Failure cases: AppealStorageError.
"""

import logging

from appeal_tracker.application.appeals.dtos import AppealResult, to_appeal_result
from appeal_tracker.domain.appeals.lifecycle import ACTIVE_STATUSES
from appeal_tracker.domain.appeals.ports import AppealRepository

logger = logging.getLogger(__name__)


class ListAllAppealsUseCase:
    """Returns every appeal regardless of status."""

    def __init__(self, appeal_repo: AppealRepository) -> None:
        self._appeal_repo = appeal_repo

    def execute(self) -> list[AppealResult]:
        """Run the list-all use case."""
        return [to_appeal_result(a) for a in self._appeal_repo.list_all()]


class ListStartedAppealsUseCase:
    """Returns appeals that are still open (New or InProgress).

    Filters the full listing in memory.
    """

    def __init__(self, appeal_repo: AppealRepository) -> None:
        self._appeal_repo = appeal_repo

    def execute(self) -> list[AppealResult]:
        """Run the list-started use case.

        Returns:
            Appeals whose status is New or InProgress.
        """
        started = [
            appeal
            for appeal in self._appeal_repo.list_all()
            if appeal.status in ACTIVE_STATUSES
        ]
        logger.debug("Found %d started appeals.", len(started))
        return [to_appeal_result(a) for a in started]
