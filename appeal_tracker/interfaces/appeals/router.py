"""
FastAPI router for the appeals bounded context.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from datetime import date

from fastapi import APIRouter, Depends, Query, Request, status

from appeal_tracker.application.appeals.cancel_all_in_progress import (
    CancelAllInProgressUseCase,
)
from appeal_tracker.application.appeals.cancel_appeal import CancelAppealUseCase
from appeal_tracker.application.appeals.complete_appeal import CompleteAppealUseCase
from appeal_tracker.application.appeals.create_appeal import CreateAppealUseCase
from appeal_tracker.application.appeals.dtos import (
    AppealResult,
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
from appeal_tracker.core.config import settings
from appeal_tracker.domain.appeals.errors import AppealValidationError
from appeal_tracker.interfaces.appeals.dependencies import (
    get_cancel_all_in_progress_use_case,
    get_cancel_appeal_use_case,
    get_complete_appeal_use_case,
    get_create_appeal_use_case,
    get_get_appeal_use_case,
    get_list_all_appeals_use_case,
    get_list_appeals_by_date_range_use_case,
    get_list_started_appeals_use_case,
    get_start_processing_use_case,
)
from appeal_tracker.interfaces.appeals.schemas import (
    AppealActionResponse,
    AppealCancelledResponse,
    AppealItem,
    AppealListResponse,
    AppealResponse,
    BulkCancelResponse,
    CancelAppealRequest,
    CompleteAppealRequest,
    CreateAppealRequest,
    ErrorResponse,
)
from appeal_tracker.shared.security.rate_limiting import limiter

router = APIRouter(prefix="/appeals", tags=["appeals"])

DAY_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

NOT_FOUND = {404: {"model": ErrorResponse}}
TRANSITION_ERRORS = {
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
    422: {"model": ErrorResponse},
}


def _parse_day(value: str, field: str) -> date:
    """Parse a YYYY-MM-DD query value into a calendar day."""
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise AppealValidationError(
            field, f"{value!r} is not a valid YYYY-MM-DD date"
        ) from exc


def _to_item(result: AppealResult) -> AppealItem:
    return AppealItem(
        id=result.id,
        theme=result.theme,
        message=result.message,
        status=result.status,
        solution=result.solution,
        cancel_reason=result.cancel_reason,
        created_at=result.created_at,
        updated_at=result.updated_at,
    )


@router.get(
    "",
    response_model=AppealListResponse,
    summary="List started appeals",
    description="Return appeals that are New or InProgress.",
)
def list_started_appeals(
    use_case: ListStartedAppealsUseCase = Depends(get_list_started_appeals_use_case),
) -> AppealListResponse:
    """List appeals that are still open."""
    return AppealListResponse(appeals=[_to_item(r) for r in use_case.execute()])


@router.get(
    "/all",
    response_model=AppealListResponse,
    summary="List all appeals",
)
def list_all_appeals(
    use_case: ListAllAppealsUseCase = Depends(get_list_all_appeals_use_case),
) -> AppealListResponse:
    """List every appeal regardless of status."""
    return AppealListResponse(appeals=[_to_item(r) for r in use_case.execute()])


@router.get(
    "/by-dates",
    response_model=AppealListResponse,
    responses={422: {"model": ErrorResponse}},
    summary="List appeals by creation date",
    description="Return appeals created between startDate and endDate (YYYY-MM-DD), "
    "both days included in full.",
)
def list_appeals_by_dates(
    start_date: str = Query(..., alias="startDate", pattern=DAY_PATTERN),
    end_date: str = Query(..., alias="endDate", pattern=DAY_PATTERN),
    use_case: ListAppealsByDateRangeUseCase = Depends(
        get_list_appeals_by_date_range_use_case
    ),
) -> AppealListResponse:
    """List appeals created within a range of calendar days."""
    query = ListAppealsByDateRangeQuery(
        start_date=_parse_day(start_date, "startDate"),
        end_date=_parse_day(end_date, "endDate"),
    )
    return AppealListResponse(appeals=[_to_item(r) for r in use_case.execute(query)])


@router.post(
    "/cancel-all-in-progress",
    response_model=BulkCancelResponse,
    summary="Cancel all open appeals",
    description="Administrative override: cancel every New and InProgress appeal.",
)
@limiter.limit(settings.rate_limit_heavy)
def cancel_all_in_progress(
    request: Request,
    use_case: CancelAllInProgressUseCase = Depends(get_cancel_all_in_progress_use_case),
) -> BulkCancelResponse:
    """Cancel every open appeal in one atomic step."""
    result = use_case.execute()
    return BulkCancelResponse(
        message="All in progress appeals canceled successfully",
        cancelled=result.cancelled,
    )


@router.get(
    "/{appeal_id}",
    response_model=AppealResponse,
    responses=NOT_FOUND,
    summary="Get an appeal",
)
def get_appeal(
    appeal_id: str,
    use_case: GetAppealUseCase = Depends(get_get_appeal_use_case),
) -> AppealResponse:
    """Return a single appeal by id."""
    return AppealResponse(appeal=_to_item(use_case.execute(appeal_id)))


@router.post(
    "",
    response_model=AppealActionResponse,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse}},
    summary="Create an appeal",
)
def create_appeal(
    request: CreateAppealRequest,
    use_case: CreateAppealUseCase = Depends(get_create_appeal_use_case),
) -> AppealActionResponse:
    """Create a new appeal in status New."""
    command = CreateAppealCommand(theme=request.theme, message=request.message)
    result = use_case.execute(command)
    return AppealActionResponse(
        message="Appeal created successfully", appeal=_to_item(result)
    )


@router.patch(
    "/{appeal_id}/start",
    response_model=AppealActionResponse,
    responses=TRANSITION_ERRORS,
    summary="Start processing an appeal",
)
def start_processing(
    appeal_id: str,
    use_case: StartProcessingUseCase = Depends(get_start_processing_use_case),
) -> AppealActionResponse:
    """Move an appeal to InProgress."""
    result = use_case.execute(appeal_id)
    return AppealActionResponse(
        message="Appeal started processing successfully", appeal=_to_item(result)
    )


@router.patch(
    "/{appeal_id}/complete",
    response_model=AppealActionResponse,
    responses=TRANSITION_ERRORS,
    summary="Complete an appeal",
)
def complete_appeal(
    appeal_id: str,
    request: CompleteAppealRequest,
    use_case: CompleteAppealUseCase = Depends(get_complete_appeal_use_case),
) -> AppealActionResponse:
    """Move an InProgress appeal to Completed with a solution."""
    command = CompleteAppealCommand(appeal_id=appeal_id, solution=request.solution)
    result = use_case.execute(command)
    return AppealActionResponse(
        message="Appeal completed successfully", appeal=_to_item(result)
    )


@router.patch(
    "/{appeal_id}/cancel",
    response_model=AppealCancelledResponse,
    responses=TRANSITION_ERRORS,
    summary="Cancel an appeal",
)
def cancel_appeal(
    appeal_id: str,
    request: CancelAppealRequest | None = None,
    use_case: CancelAppealUseCase = Depends(get_cancel_appeal_use_case),
) -> AppealCancelledResponse:
    """Move a New or InProgress appeal to Cancelled."""
    command = CancelAppealCommand(
        appeal_id=appeal_id,
        reason=request.reason if request is not None else None,
    )
    result = use_case.execute(command)
    return AppealCancelledResponse(
        message="Appeal canceled successfully", id=result.id
    )
