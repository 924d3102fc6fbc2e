"""
Domain Entities Package

This package contains the core domain entities and business logic.
"""

from .errors import DomainError, EmptyUpdate, FetchFailure
from .forecast import (
    CurrentForecast,
    EventRecord,
    ForecastState,
    Prediction,
    PredictionHistory,
    PredictionIdFactory,
    PredictionSource,
)
from .health import ApplicationInfo, DependencyStatus, ServiceStatus, SystemHealth

__all__ = [
    "EventRecord",
    "Prediction",
    "PredictionSource",
    "PredictionHistory",
    "PredictionIdFactory",
    "CurrentForecast",
    "ForecastState",
    "SystemHealth",
    "DependencyStatus",
    "ServiceStatus",
    "ApplicationInfo",
    "DomainError",
    "FetchFailure",
    "EmptyUpdate",
]
