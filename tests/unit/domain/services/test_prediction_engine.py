from __future__ import annotations

from datetime import timedelta

import pytest

from src.domain.entities.errors import EmptyUpdate
from src.domain.entities.forecast import EventRecord, PredictionSource
from src.domain.services.prediction_engine import (
    PredictionEngine,
    mean_duration,
    mean_interval_ms,
    round_half_up,
)
from tests.conftest import ms


def test_mean_interval_is_mean_of_consecutive_gaps(sample_events) -> None:
    assert mean_interval_ms(sample_events) == 30_000


def test_mean_interval_uses_absolute_value_for_oldest_first_input(
    sample_events,
) -> None:
    assert mean_interval_ms(list(reversed(sample_events))) == 30_000


def test_mean_interval_uneven_gaps() -> None:
    events = [
        EventRecord(timestamp=ms(50_000), duration=1),
        EventRecord(timestamp=ms(40_000), duration=1),
        EventRecord(timestamp=ms(10_000), duration=1),
    ]
    assert mean_interval_ms(events) == 20_000


@pytest.mark.parametrize("count", [0, 1])
def test_mean_interval_defaults_below_two_events(count) -> None:
    events = [EventRecord(timestamp=ms(1_000), duration=20)] * count
    assert mean_interval_ms(events) == 30_000


def test_mean_duration_defaults_for_empty_input() -> None:
    assert mean_duration([]) == 15


def test_mean_duration_is_unrounded(sample_events) -> None:
    assert mean_duration(sample_events) == pytest.approx(37 / 3)


@pytest.mark.parametrize(
    ("value", "expected"),
    [(12.333, 12), (12.5, 13), (13.5, 14), (0.49, 0), (-2.5, -2)],
)
def test_round_half_up(value, expected) -> None:
    assert round_half_up(value) == expected


def test_derive_prediction_from_live_events(engine, sample_events) -> None:
    prediction = engine.derive_prediction(sample_events)

    assert prediction.source is PredictionSource.LIVE
    assert prediction.predicted_time == ms(130_000)
    assert prediction.predicted_duration == 12

    state = engine.state
    assert state.history.latest() == prediction
    assert state.forecast.next_flight_time == prediction.predicted_time
    assert state.forecast.flight_duration == 12


def test_single_event_uses_default_interval(engine) -> None:
    prediction = engine.derive_prediction(
        [EventRecord(timestamp=ms(1_000), duration=20)]
    )

    assert prediction.predicted_time == ms(31_000)
    assert prediction.predicted_duration == 20


def test_empty_events_raise_empty_update(engine) -> None:
    with pytest.raises(EmptyUpdate):
        engine.derive_prediction([])
    assert len(engine.state.history) == 0


def test_negative_durations_propagate_unvalidated(engine) -> None:
    prediction = engine.derive_prediction(
        [
            EventRecord(timestamp=ms(10_000), duration=-4),
            EventRecord(timestamp=ms(5_000), duration=-2),
        ]
    )
    assert prediction.predicted_duration == -3


def test_custom_defaults_are_honoured(forecast_state, id_factory) -> None:
    engine = PredictionEngine(
        forecast_state,
        id_factory,
        default_interval_ms=5_000,
        default_duration=7,
    )
    event = EventRecord(timestamp=ms(0), duration=3)

    prediction = engine.derive_prediction([event])

    assert prediction.predicted_time - event.timestamp == timedelta(seconds=5)


def test_history_keeps_ten_newest_entries(engine, sample_events) -> None:
    produced = [engine.derive_prediction(sample_events) for _ in range(11)]

    snapshot = engine.state.snapshot_history()
    assert len(snapshot) == 10
    assert snapshot[0] == produced[-1]
    assert produced[0] not in snapshot
    assert engine.state.forecast.next_flight_time == produced[-1].predicted_time


def test_prediction_ids_are_unique_and_increasing(engine, sample_events) -> None:
    ids = [engine.derive_prediction(sample_events).id for _ in range(5)]
    assert ids == sorted(set(ids))
