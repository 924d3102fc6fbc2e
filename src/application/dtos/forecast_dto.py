"""
Application DTOs - Forecast

Data Transfer Objects for the current forecast, the prediction history
and the manual trigger response.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from src.domain.entities.forecast import CurrentForecast, Prediction, PredictionSource
from src.shared.formatting import format_clock, format_countdown, format_duration


class PredictionDTO(BaseModel):
    """Serializable representation of a single prediction."""

    id: int = Field(description="Unique, increasing prediction identifier")
    predicted_time: datetime = Field(description="Expected start of the next flight")
    predicted_duration: int = Field(description="Expected flight duration in seconds")
    source: PredictionSource = Field(description="Where the prediction came from")
    predicted_time_label: str = Field(description="Predicted time as HH:MM:SS")

    @classmethod
    def from_domain(cls, prediction: Prediction) -> "PredictionDTO":
        return cls(
            id=prediction.id,
            predicted_time=prediction.predicted_time,
            predicted_duration=prediction.predicted_duration,
            source=prediction.source,
            predicted_time_label=format_clock(prediction.predicted_time),
        )


class PredictionHistoryDTO(BaseModel):
    """DTO returned by the history endpoint, newest first."""

    items: List[PredictionDTO] = Field(default_factory=list)
    limit: int = Field(description="Maximum number of retained predictions")

    model_config = {
        "json_schema_extra": {
            "example": {
                "items": [
                    {
                        "id": 1718000000000,
                        "predicted_time": "2024-06-10T06:13:50Z",
                        "predicted_duration": 12,
                        "source": "API",
                        "predicted_time_label": "06:13:50",
                    }
                ],
                "limit": 10,
            }
        }
    }


class ForecastSnapshotDTO(BaseModel):
    """DTO describing the forecast currently on display."""

    next_flight_time: Optional[datetime] = None
    flight_duration: Optional[int] = None
    next_flight_label: str = Field(description="Next flight as HH:MM:SS")
    time_remaining: str = Field(description="Countdown as M:SS, 'Now!' or 'Unknown'")
    duration_label: str = Field(description="Duration as 'N seconds' or '--'")
    loading: bool = Field(description="A manual prediction is in progress")
    error: Optional[str] = Field(default=None, description="Last cycle error")
    scheduler_state: str = Field(description="Poller state (idle or fetching)")

    @classmethod
    def from_domain(
        cls,
        forecast: CurrentForecast,
        *,
        now: datetime,
        loading: bool,
        error: Optional[str],
        scheduler_state: str,
    ) -> "ForecastSnapshotDTO":
        return cls(
            next_flight_time=forecast.next_flight_time,
            flight_duration=forecast.flight_duration,
            next_flight_label=format_clock(forecast.next_flight_time),
            time_remaining=format_countdown(forecast.next_flight_time, now),
            duration_label=format_duration(forecast.flight_duration),
            loading=loading,
            error=error,
            scheduler_state=scheduler_state,
        )


class ManualPredictionResponseDTO(BaseModel):
    """Acknowledgement for a manual prediction request."""

    accepted: bool = True
    coalesced: bool = Field(
        description="True when the request joined a cycle already in flight"
    )
