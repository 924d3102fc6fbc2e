"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .forecast_dto import (
    ForecastSnapshotDTO,
    ManualPredictionResponseDTO,
    PredictionDTO,
    PredictionHistoryDTO,
)
from .health_dto import ApplicationInfoDTO, DependencyStatusDTO, SystemHealthDTO

__all__ = [
    "ForecastSnapshotDTO",
    "ManualPredictionResponseDTO",
    "PredictionDTO",
    "PredictionHistoryDTO",
    "SystemHealthDTO",
    "DependencyStatusDTO",
    "ApplicationInfoDTO",
]
