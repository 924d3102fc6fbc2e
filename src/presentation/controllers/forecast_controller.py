"""
Presentation Layer - Forecast Controller

Exposes the forecast on display, the prediction history and the manual
prediction trigger.
"""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status

from src.application.dtos.forecast_dto import (
    ForecastSnapshotDTO,
    ManualPredictionResponseDTO,
    PredictionHistoryDTO,
)
from src.application.use_cases.forecast_use_cases import (
    GetForecastSnapshotUseCase,
    GetPredictionHistoryUseCase,
    TriggerManualPredictionUseCase,
)
from src.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Forecast"])


@router.get(
    "/forecast",
    response_model=ForecastSnapshotDTO,
    summary="Current flight forecast",
)
@inject
async def get_forecast(
    forecast_use_case: GetForecastSnapshotUseCase = Depends(
        Provide["get_forecast_snapshot_use_case"]
    ),
) -> ForecastSnapshotDTO:
    """Return the next flight time, the countdown and the cycle status."""
    return forecast_use_case.execute()


@router.get(
    "/predictions",
    response_model=PredictionHistoryDTO,
    summary="Recent predictions, newest first",
)
@inject
async def get_predictions(
    history_use_case: GetPredictionHistoryUseCase = Depends(
        Provide["get_prediction_history_use_case"]
    ),
) -> PredictionHistoryDTO:
    return history_use_case.execute()


@router.post(
    "/predictions",
    response_model=ManualPredictionResponseDTO,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Request a new prediction now",
    description="""
    Starts a prediction cycle in the background. When a cycle is already
    running the request joins it instead of issuing a second fetch; the new
    prediction shows up in `/forecast` and `/predictions` once it completes.
    """,
)
@inject
async def trigger_prediction(
    trigger_use_case: TriggerManualPredictionUseCase = Depends(
        Provide["trigger_manual_prediction_use_case"]
    ),
) -> ManualPredictionResponseDTO:
    coalesced = trigger_use_case.execute()
    logger.info("forecast.manual_trigger", coalesced=coalesced)
    return ManualPredictionResponseDTO(coalesced=coalesced)
