"""
Use case: Retrieve a single appeal by id.

Input: appeal id
Output: AppealResult
Side effects: None (read-only query).
Failure cases: AppealNotFoundError.
"""

from appeal_tracker.application.appeals.dtos import AppealResult, to_appeal_result
from appeal_tracker.domain.appeals.ports import AppealRepository


class GetAppealUseCase:
    """Read-only lookup of one appeal."""

    def __init__(self, appeal_repo: AppealRepository) -> None:
        self._appeal_repo = appeal_repo

    def execute(self, appeal_id: str) -> AppealResult:
        """Return the appeal with the given id."""
        return to_appeal_result(self._appeal_repo.get(appeal_id))
