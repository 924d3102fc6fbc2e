"""Domain services package."""

from .fallback_generator import FallbackGenerator
from .prediction_engine import (
    PredictionEngine,
    mean_duration,
    mean_interval_ms,
    round_half_up,
)

__all__ = [
    "FallbackGenerator",
    "PredictionEngine",
    "mean_duration",
    "mean_interval_ms",
    "round_half_up",
]
