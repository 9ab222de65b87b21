"""
Tests for the appeals application layer (use cases).

Use cases run against a real in-memory repository; failure
propagation is checked with mocked ports.
"""

from dataclasses import replace
from datetime import date, datetime
from unittest.mock import MagicMock

import pytest

from appeal_tracker.application.appeals.cancel_all_in_progress import (
    CancelAllInProgressUseCase,
)
from appeal_tracker.application.appeals.cancel_appeal import CancelAppealUseCase
from appeal_tracker.application.appeals.complete_appeal import CompleteAppealUseCase
from appeal_tracker.application.appeals.create_appeal import CreateAppealUseCase
from appeal_tracker.application.appeals.dtos import (
    CancelAppealCommand,
    CompleteAppealCommand,
    CreateAppealCommand,
    ListAppealsByDateRangeQuery,
)
from appeal_tracker.application.appeals.get_appeal import GetAppealUseCase
from appeal_tracker.application.appeals.list_appeals import (
    ListAllAppealsUseCase,
    ListStartedAppealsUseCase,
)
from appeal_tracker.application.appeals.list_appeals_by_date_range import (
    ListAppealsByDateRangeUseCase,
)
from appeal_tracker.application.appeals.start_processing import StartProcessingUseCase
from appeal_tracker.domain.appeals.entities import Appeal, AppealStatus
from appeal_tracker.domain.appeals.errors import (
    AppealConflictError,
    AppealNotFoundError,
    AppealStorageError,
    AppealValidationError,
    InvalidTransitionError,
)
from appeal_tracker.domain.appeals.lifecycle import AppealLifecycle
from appeal_tracker.domain.appeals.ports import AppealRepository


def _create(repository, theme: str = "t", message: str = "m"):
    return CreateAppealUseCase(repository).execute(
        CreateAppealCommand(theme=theme, message=message)
    )


def _in_status(repository, status: AppealStatus) -> str:
    """Create an appeal and force it into ``status``; return its id."""
    appeal_id = _create(repository).id
    if status is not AppealStatus.NEW:
        stored = repository.get(appeal_id)
        repository.update(replace(stored, status=status))
    return appeal_id


class TestCreateAppealUseCase:
    """Tests for the CreateAppealUseCase."""

    def test_valid_request_creates_new_appeal(self, repository) -> None:
        result = _create(repository, "Billing", "Charged twice")

        assert result.status == "New"
        assert result.theme == "Billing"
        assert result.message == "Charged twice"
        assert result.created_at == result.updated_at
        assert repository.get(result.id).status is AppealStatus.NEW

    @pytest.mark.parametrize(
        "theme,message,field",
        [("", "m", "theme"), ("t", "", "message"), ("   ", "m", "theme")],
    )
    def test_empty_fields_rejected(self, repository, theme, message, field) -> None:
        with pytest.raises(AppealValidationError) as exc_info:
            _create(repository, theme, message)

        assert exc_info.value.field == field
        assert repository.list_all() == []


class TestStartProcessingUseCase:
    """Tests for the StartProcessingUseCase."""

    @pytest.mark.parametrize("status", [AppealStatus.NEW, AppealStatus.CANCELLED])
    def test_allowed_sources(self, repository, lifecycle, status) -> None:
        appeal_id = _in_status(repository, status)

        result = StartProcessingUseCase(repository, lifecycle).execute(appeal_id)

        assert result.status == "InProgress"

    @pytest.mark.parametrize(
        "status", [AppealStatus.IN_PROGRESS, AppealStatus.COMPLETED]
    )
    def test_disallowed_sources(self, repository, lifecycle, status) -> None:
        appeal_id = _in_status(repository, status)
        before = repository.get(appeal_id)

        with pytest.raises(InvalidTransitionError):
            StartProcessingUseCase(repository, lifecycle).execute(appeal_id)

        assert repository.get(appeal_id) == before

    def test_missing_appeal(self, repository, lifecycle) -> None:
        with pytest.raises(AppealNotFoundError):
            StartProcessingUseCase(repository, lifecycle).execute("missing")

    def test_write_is_conditional_on_status_read(self, lifecycle) -> None:
        stored = Appeal(
            id="a1",
            theme="t",
            message="m",
            status=AppealStatus.NEW,
            solution="",
            cancel_reason="",
            created_at=datetime(2025, 1, 1),
            updated_at=datetime(2025, 1, 1),
        )
        repo = MagicMock(spec=AppealRepository)
        repo.get.return_value = stored
        repo.update.side_effect = AppealConflictError("a1", "New")

        with pytest.raises(AppealConflictError):
            StartProcessingUseCase(repo, lifecycle).execute("a1")

        written, = repo.update.call_args.args
        assert written.status is AppealStatus.IN_PROGRESS
        assert repo.update.call_args.kwargs == {"expected_status": AppealStatus.NEW}


class TestCompleteAppealUseCase:
    """Tests for the CompleteAppealUseCase."""

    def test_completes_in_progress_appeal(self, repository, lifecycle) -> None:
        appeal_id = _in_status(repository, AppealStatus.IN_PROGRESS)

        result = CompleteAppealUseCase(repository, lifecycle).execute(
            CompleteAppealCommand(appeal_id=appeal_id, solution="fixed")
        )

        assert result.status == "Completed"
        assert result.solution == "fixed"

    @pytest.mark.parametrize(
        "status",
        [AppealStatus.NEW, AppealStatus.COMPLETED, AppealStatus.CANCELLED],
    )
    def test_disallowed_sources(self, repository, lifecycle, status) -> None:
        appeal_id = _in_status(repository, status)

        with pytest.raises(InvalidTransitionError):
            CompleteAppealUseCase(repository, lifecycle).execute(
                CompleteAppealCommand(appeal_id=appeal_id, solution="x")
            )

    @pytest.mark.parametrize("solution", ["", "  "])
    def test_empty_solution_rejected_before_reading(self, lifecycle, solution) -> None:
        repo = MagicMock(spec=AppealRepository)

        with pytest.raises(AppealValidationError):
            CompleteAppealUseCase(repo, lifecycle).execute(
                CompleteAppealCommand(appeal_id="a1", solution=solution)
            )

        repo.get.assert_not_called()


class TestCancelAppealUseCase:
    """Tests for the CancelAppealUseCase."""

    @pytest.mark.parametrize("status", [AppealStatus.NEW, AppealStatus.IN_PROGRESS])
    def test_allowed_sources(self, repository, lifecycle, status) -> None:
        appeal_id = _in_status(repository, status)

        result = CancelAppealUseCase(repository, lifecycle).execute(
            CancelAppealCommand(appeal_id=appeal_id)
        )

        assert result.status == "Cancelled"
        assert result.cancel_reason == ""

    @pytest.mark.parametrize(
        "status", [AppealStatus.COMPLETED, AppealStatus.CANCELLED]
    )
    def test_disallowed_sources(self, repository, lifecycle, status) -> None:
        appeal_id = _in_status(repository, status)

        with pytest.raises(InvalidTransitionError):
            CancelAppealUseCase(repository, lifecycle).execute(
                CancelAppealCommand(appeal_id=appeal_id)
            )

    def test_reason_is_recorded_when_given(self, repository, lifecycle) -> None:
        appeal_id = _in_status(repository, AppealStatus.NEW)

        CancelAppealUseCase(repository, lifecycle).execute(
            CancelAppealCommand(appeal_id=appeal_id, reason="duplicate")
        )

        assert repository.get(appeal_id).cancel_reason == "duplicate"


class TestCancelAllInProgressUseCase:
    """Tests for the CancelAllInProgressUseCase."""

    def test_cancels_open_appeals_only(self, repository) -> None:
        a = _in_status(repository, AppealStatus.NEW)
        b = _in_status(repository, AppealStatus.IN_PROGRESS)
        c = _in_status(repository, AppealStatus.COMPLETED)
        d = _in_status(repository, AppealStatus.CANCELLED)
        d_before = repository.get(d)

        result = CancelAllInProgressUseCase(repository).execute()

        assert result.cancelled == 2
        assert repository.get(a).status is AppealStatus.CANCELLED
        assert repository.get(b).status is AppealStatus.CANCELLED
        assert repository.get(c).status is AppealStatus.COMPLETED
        assert repository.get(d) == d_before

    def test_is_idempotent(self, repository) -> None:
        _in_status(repository, AppealStatus.NEW)
        _in_status(repository, AppealStatus.COMPLETED)
        use_case = CancelAllInProgressUseCase(repository)

        use_case.execute()
        once = {(a.id, a.status) for a in repository.list_all()}
        second = use_case.execute()
        twice = {(a.id, a.status) for a in repository.list_all()}

        assert second.cancelled == 0
        assert once == twice


class TestListUseCases:
    """Tests for the listing and lookup use cases."""

    def test_list_started_filters_to_open_statuses(self, repository) -> None:
        open_ids = {
            _in_status(repository, AppealStatus.NEW),
            _in_status(repository, AppealStatus.IN_PROGRESS),
        }
        _in_status(repository, AppealStatus.COMPLETED)
        _in_status(repository, AppealStatus.CANCELLED)

        started = ListStartedAppealsUseCase(repository).execute()

        assert {r.id for r in started} == open_ids

    def test_list_all_returns_everything(self, repository) -> None:
        for status in AppealStatus:
            _in_status(repository, status)
        assert len(ListAllAppealsUseCase(repository).execute()) == 4

    def test_get_appeal(self, repository) -> None:
        created = _create(repository)
        assert GetAppealUseCase(repository).execute(created.id) == created

    def test_storage_errors_propagate_unchanged(self) -> None:
        repo = MagicMock(spec=AppealRepository)
        repo.list_all.side_effect = AppealStorageError("list_all", "OperationalError")

        with pytest.raises(AppealStorageError):
            ListStartedAppealsUseCase(repo).execute()


class TestListAppealsByDateRangeUseCase:
    """Tests for the ListAppealsByDateRangeUseCase."""

    def test_single_day_covers_whole_day(self, repository, clock) -> None:
        day = date(2025, 10, 27)
        ids = {}
        for label, when in [
            ("prev_day_last_instant", datetime(2025, 10, 26, 23, 59, 59, 999999)),
            ("midnight", datetime(2025, 10, 27, 0, 0, 0)),
            ("noon", datetime(2025, 10, 27, 12, 0, 0)),
            ("last_second", datetime(2025, 10, 27, 23, 59, 59)),
            ("next_midnight", datetime(2025, 10, 28, 0, 0, 0)),
        ]:
            clock.set(when)
            ids[label] = _create(repository, label).id

        results = ListAppealsByDateRangeUseCase(repository).execute(
            ListAppealsByDateRangeQuery(start_date=day, end_date=day)
        )

        assert {r.id for r in results} == {ids["midnight"], ids["noon"], ids["last_second"]}

    def test_multi_day_range(self, repository, clock) -> None:
        for day in (25, 26, 27, 28):
            clock.set(datetime(2025, 10, day, 18, 30))
            _create(repository, f"day-{day}")

        results = ListAppealsByDateRangeUseCase(repository).execute(
            ListAppealsByDateRangeQuery(
                start_date=date(2025, 10, 26), end_date=date(2025, 10, 27)
            )
        )

        assert sorted(r.theme for r in results) == ["day-26", "day-27"]

    def test_reversed_range_is_empty(self, repository) -> None:
        _create(repository)
        results = ListAppealsByDateRangeUseCase(repository).execute(
            ListAppealsByDateRangeQuery(
                start_date=date(2025, 10, 28), end_date=date(2025, 10, 26)
            )
        )
        assert results == []

    def test_end_is_widened_to_end_of_day(self) -> None:
        repo = MagicMock(spec=AppealRepository)
        repo.list_by_created_range.return_value = []

        ListAppealsByDateRangeUseCase(repo).execute(
            ListAppealsByDateRangeQuery(
                start_date=date(2025, 10, 1), end_date=date(2025, 10, 2)
            )
        )

        start, end = repo.list_by_created_range.call_args.args
        assert start == datetime(2025, 10, 1, 0, 0, 0)
        assert end.date() == date(2025, 10, 2)
        assert (end.hour, end.minute, end.second) == (23, 59, 59)
        assert end.microsecond == 999999

    def test_final_fraction_of_end_day_is_included(self, repository, clock) -> None:
        clock.set(datetime(2025, 10, 27, 23, 59, 59, 500000))
        late = _create(repository, "late")

        results = ListAppealsByDateRangeUseCase(repository).execute(
            ListAppealsByDateRangeQuery(
                start_date=date(2025, 10, 27), end_date=date(2025, 10, 27)
            )
        )

        assert [r.id for r in results] == [late.id]


class TestAppealScenario:
    """End-to-end lifecycle through the use cases."""

    def test_create_start_complete_then_reject_second_completion(
        self, repository, lifecycle
    ) -> None:
        appeal = _create(repository, "t", "m")
        assert appeal.status == "New"

        started = StartProcessingUseCase(repository, lifecycle).execute(appeal.id)
        assert started.status == "InProgress"

        complete = CompleteAppealUseCase(repository, lifecycle)
        done = complete.execute(CompleteAppealCommand(appeal_id=appeal.id, solution="fixed"))
        assert done.status == "Completed"
        assert done.solution == "fixed"
        assert done.created_at == appeal.created_at
        assert done.updated_at >= done.created_at

        with pytest.raises(InvalidTransitionError):
            complete.execute(CompleteAppealCommand(appeal_id=appeal.id, solution="again"))

        assert repository.get(appeal.id).solution == "fixed"

    def test_cancelled_appeal_can_be_reopened(self, repository, lifecycle) -> None:
        appeal = _create(repository)
        CancelAppealUseCase(repository, lifecycle).execute(
            CancelAppealCommand(appeal_id=appeal.id, reason="user left")
        )

        reopened = StartProcessingUseCase(repository, lifecycle).execute(appeal.id)

        assert reopened.status == "InProgress"
        assert reopened.cancel_reason == "user left"
