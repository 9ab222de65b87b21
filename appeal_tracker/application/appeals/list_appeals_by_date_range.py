"""
Use case: Retrieve appeals created within a range of calendar days.

Input: ListAppealsByDateRangeQuery (start_date, end_date)
Output: list[AppealResult]
Side effects: None (read-only query).
Failure cases: AppealStorageError.
"""

import logging
from datetime import datetime, time

from appeal_tracker.application.appeals.dtos import (
    AppealResult,
    ListAppealsByDateRangeQuery,
    to_appeal_result,
)
from appeal_tracker.domain.appeals.ports import AppealRepository

logger = logging.getLogger(__name__)


class ListAppealsByDateRangeUseCase:
    """Orchestrates a day-granular created_at range query.

    The end date is widened to its last instant, 23:59:59.999999,
    rather than 23:59:59. Stored timestamps carry microseconds, so a
    whole-second bound would drop appeals created during the final
    second of the end day.
    """

    def __init__(self, appeal_repo: AppealRepository) -> None:
        self._appeal_repo = appeal_repo

    def execute(self, query: ListAppealsByDateRangeQuery) -> list[AppealResult]:
        """Run the date range use case.

        Args:
            query: First and last calendar day of the range.

        Returns:
            Appeals created between 00:00:00 of start_date and
            23:59:59.999999 of end_date. Empty when start_date > end_date.
        """
        start = datetime.combine(query.start_date, time.min)
        end = datetime.combine(query.end_date, time.max)

        logger.info(
            "Retrieving appeals created between %s and %s",
            query.start_date,
            query.end_date,
        )

        appeals = self._appeal_repo.list_by_created_range(start, end)
        return [to_appeal_result(a) for a in appeals]
