"""Read-side use cases for the forecast and the prediction history."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from src.application.dtos.forecast_dto import (
    ForecastSnapshotDTO,
    PredictionDTO,
    PredictionHistoryDTO,
)
from src.domain.entities.forecast import ForecastState
from src.domain.ports.scheduler import IPredictionScheduler


class GetForecastSnapshotUseCase:
    """Return the forecast on display along with the cycle status."""

    def __init__(self, state: ForecastState, scheduler: IPredictionScheduler) -> None:
        self._state = state
        self._scheduler = scheduler

    def execute(self, now: Optional[datetime] = None) -> ForecastSnapshotDTO:
        return ForecastSnapshotDTO.from_domain(
            self._state.snapshot_forecast(),
            now=now or datetime.now(timezone.utc),
            loading=self._scheduler.loading,
            error=self._state.error,
            scheduler_state=self._scheduler.state.value,
        )


class GetPredictionHistoryUseCase:
    """Return the rolling prediction log, newest first."""

    def __init__(self, state: ForecastState) -> None:
        self._state = state

    def execute(self) -> PredictionHistoryDTO:
        return PredictionHistoryDTO(
            items=[PredictionDTO.from_domain(p) for p in self._state.snapshot_history()],
            limit=self._state.history.limit,
        )


class TriggerManualPredictionUseCase:
    """Ask the scheduler for a manual cycle without waiting for it."""

    def __init__(self, scheduler: IPredictionScheduler) -> None:
        self._scheduler = scheduler

    def execute(self) -> bool:
        """Schedule the cycle; True when it joined one already in flight."""
        return self._scheduler.request_manual()
