"""
Use case: Cancel every open appeal at once.

Input: None
Output: BulkCancelResult
Side effects: Moves all New and InProgress appeals to Cancelled.
Failure cases: AppealStorageError.
"""

import logging

from appeal_tracker.application.appeals.dtos import BulkCancelResult
from appeal_tracker.domain.appeals.lifecycle import ACTIVE_STATUSES
from appeal_tracker.domain.appeals.ports import AppealRepository

logger = logging.getLogger(__name__)


class CancelAllInProgressUseCase:
    """Administrative override that cancels all open appeals.

    Bypasses the per-appeal lifecycle check and relies on the
    repository's single atomic update. Running it twice leaves the
    same state as running it once.
    """

    def __init__(self, appeal_repo: AppealRepository) -> None:
        self._appeal_repo = appeal_repo

    def execute(self) -> BulkCancelResult:
        """Run the bulk cancellation use case."""
        cancelled = self._appeal_repo.bulk_cancel(ACTIVE_STATUSES)
        logger.info("Cancelled %d open appeals", cancelled)
        return BulkCancelResult(cancelled=cancelled)
