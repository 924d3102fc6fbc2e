"""
Presentation Layer - System Controller

Health and metadata for the predictor. ``/health`` lists the poller and the
recent games API; ``/info`` adds version, uptime and the polling setup.
"""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Request, status

from src.application.dtos.health_dto import ApplicationInfoDTO, SystemHealthDTO
from src.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from src.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


@router.get(
    "/health",
    response_model=SystemHealthDTO,
    summary="Poller and data source status",
    description="""
    `poller` is up while the polling timer is armed. `recent_games_api` is
    unknown until the first cycle, degraded while the last cycle fell back,
    and up otherwise. The overall status is the worst of the two.
    """,
)
@inject
async def health(
    get_health_status_use_case: GetHealthStatusUseCase = Depends(
        Provide["get_health_status_use_case"]
    ),
) -> SystemHealthDTO:
    try:
        report = await get_health_status_use_case.execute()
    except Exception as exc:
        logger.error("system.health.failed", error=str(exc), exc_info=exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Predictor health could not be evaluated",
        ) from exc

    logger.debug("system.health", status=report.status.value)
    return report


@router.get(
    "/info",
    response_model=ApplicationInfoDTO,
    summary="Predictor version, uptime and polling setup",
)
@inject
async def info(
    request: Request,
    get_application_info_use_case: GetApplicationInfoUseCase = Depends(
        Provide["get_application_info_use_case"]
    ),
) -> ApplicationInfoDTO:
    started_at = getattr(request.app.state, "started_at", None)
    try:
        report = await get_application_info_use_case.execute(started_at)
    except Exception as exc:
        logger.error("system.info.failed", error=str(exc), exc_info=exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Predictor info could not be assembled",
        ) from exc

    logger.debug("system.info", status=report.status.value)
    return report
