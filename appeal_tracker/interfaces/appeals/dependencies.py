"""
Dependency injection for the appeals bounded context.

Provides FastAPI dependency functions that wire the repository
built at startup into use cases via constructor injection.
"""

from fastapi import Depends, Request

from appeal_tracker.application.appeals.cancel_all_in_progress import (
    CancelAllInProgressUseCase,
)
from appeal_tracker.application.appeals.cancel_appeal import CancelAppealUseCase
from appeal_tracker.application.appeals.complete_appeal import CompleteAppealUseCase
from appeal_tracker.application.appeals.create_appeal import CreateAppealUseCase
from appeal_tracker.application.appeals.get_appeal import GetAppealUseCase
from appeal_tracker.application.appeals.list_appeals import (
    ListAllAppealsUseCase,
    ListStartedAppealsUseCase,
)
from appeal_tracker.application.appeals.list_appeals_by_date_range import (
    ListAppealsByDateRangeUseCase,
)
from appeal_tracker.application.appeals.start_processing import StartProcessingUseCase
from appeal_tracker.domain.appeals.lifecycle import AppealLifecycle
from appeal_tracker.domain.appeals.ports import AppealRepository

_lifecycle = AppealLifecycle()


def get_appeal_repository(request: Request) -> AppealRepository:
    """Return the repository created by the application lifespan."""
    return request.app.state.appeal_repository


def get_create_appeal_use_case(
    repo: AppealRepository = Depends(get_appeal_repository),
) -> CreateAppealUseCase:
    """Build CreateAppealUseCase with its repository."""
    return CreateAppealUseCase(appeal_repo=repo)


def get_get_appeal_use_case(
    repo: AppealRepository = Depends(get_appeal_repository),
) -> GetAppealUseCase:
    """Build GetAppealUseCase with its repository."""
    return GetAppealUseCase(appeal_repo=repo)


def get_list_all_appeals_use_case(
    repo: AppealRepository = Depends(get_appeal_repository),
) -> ListAllAppealsUseCase:
    """Build ListAllAppealsUseCase with its repository."""
    return ListAllAppealsUseCase(appeal_repo=repo)


def get_list_started_appeals_use_case(
    repo: AppealRepository = Depends(get_appeal_repository),
) -> ListStartedAppealsUseCase:
    """Build ListStartedAppealsUseCase with its repository."""
    return ListStartedAppealsUseCase(appeal_repo=repo)


def get_list_appeals_by_date_range_use_case(
    repo: AppealRepository = Depends(get_appeal_repository),
) -> ListAppealsByDateRangeUseCase:
    """Build ListAppealsByDateRangeUseCase with its repository."""
    return ListAppealsByDateRangeUseCase(appeal_repo=repo)


def get_start_processing_use_case(
    repo: AppealRepository = Depends(get_appeal_repository),
) -> StartProcessingUseCase:
    """Build StartProcessingUseCase with its repository and lifecycle rules."""
    return StartProcessingUseCase(appeal_repo=repo, lifecycle=_lifecycle)


def get_complete_appeal_use_case(
    repo: AppealRepository = Depends(get_appeal_repository),
) -> CompleteAppealUseCase:
    """Build CompleteAppealUseCase with its repository and lifecycle rules."""
    return CompleteAppealUseCase(appeal_repo=repo, lifecycle=_lifecycle)


def get_cancel_appeal_use_case(
    repo: AppealRepository = Depends(get_appeal_repository),
) -> CancelAppealUseCase:
    """Build CancelAppealUseCase with its repository and lifecycle rules."""
    return CancelAppealUseCase(appeal_repo=repo, lifecycle=_lifecycle)


def get_cancel_all_in_progress_use_case(
    repo: AppealRepository = Depends(get_appeal_repository),
) -> CancelAllInProgressUseCase:
    """Build CancelAllInProgressUseCase with its repository."""
    return CancelAllInProgressUseCase(appeal_repo=repo)
