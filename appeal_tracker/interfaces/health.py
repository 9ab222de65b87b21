"""
Health check router.

Reports liveness together with the readiness of the appeal store,
so orchestrators can hold traffic until the database answers.
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from appeal_tracker.core.config import settings
from appeal_tracker.domain.appeals.errors import AppealStorageError
from appeal_tracker.domain.appeals.ports import AppealRepository
from appeal_tracker.interfaces.appeals.dependencies import get_appeal_repository
from appeal_tracker.interfaces.appeals.schemas import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
    summary="Health check",
    description="Returns service status, version and appeal store readiness. "
    "Responds 503 while the store is unreachable.",
)
def health_check(
    response: Response,
    repo: AppealRepository = Depends(get_appeal_repository),
) -> HealthResponse:
    """Return application health and whether the appeal store answers."""
    try:
        repo.ping()
    except AppealStorageError as exc:
        logger.warning("Health check: appeal store unavailable (%s)", exc.reason)
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return HealthResponse(
            status="degraded", version=settings.version, store="unavailable"
        )
    return HealthResponse(status="ok", version=settings.version, store="ready")
