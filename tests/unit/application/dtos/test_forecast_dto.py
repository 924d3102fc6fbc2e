from __future__ import annotations

from datetime import timedelta

from src.application.dtos.forecast_dto import ForecastSnapshotDTO, PredictionDTO
from src.domain.entities.forecast import CurrentForecast, Prediction, PredictionSource
from tests.conftest import FIXED_NOW


def test_prediction_dto_serializes_source_label() -> None:
    prediction = Prediction(
        id=17,
        predicted_time=FIXED_NOW,
        predicted_duration=9,
        source=PredictionSource.FALLBACK,
    )

    dto = PredictionDTO.from_domain(prediction)
    payload = dto.model_dump(mode="json")

    assert payload["source"] == "Fallback"
    assert payload["predicted_time_label"] == "06:13:20"
    assert payload["predicted_duration"] == 9


def test_snapshot_dto_formats_due_forecast() -> None:
    forecast = CurrentForecast(next_flight_time=FIXED_NOW, flight_duration=4)

    dto = ForecastSnapshotDTO.from_domain(
        forecast,
        now=FIXED_NOW + timedelta(seconds=3),
        loading=False,
        error=None,
        scheduler_state="idle",
    )

    assert dto.time_remaining == "Now!"
    assert dto.duration_label == "4 seconds"
    assert dto.next_flight_label == "06:13:20"
