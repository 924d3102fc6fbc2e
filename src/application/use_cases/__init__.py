"""
Use Cases Package - Application Layer

This package contains use cases that implement the business logic
of the application. Use cases orchestrate the flow of data to and from
the entities and implement the business rules of the application.
"""

from .forecast_use_cases import (
    GetForecastSnapshotUseCase,
    GetPredictionHistoryUseCase,
    TriggerManualPredictionUseCase,
)
from .health_use_cases import GetApplicationInfoUseCase, GetHealthStatusUseCase
from .prediction_cycle_use_case import RunPredictionCycleUseCase

__all__ = [
    "RunPredictionCycleUseCase",
    "GetForecastSnapshotUseCase",
    "GetPredictionHistoryUseCase",
    "TriggerManualPredictionUseCase",
    "GetHealthStatusUseCase",
    "GetApplicationInfoUseCase",
]
