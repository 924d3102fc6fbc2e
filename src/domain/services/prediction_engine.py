"""Domain service turning recent games into flight predictions."""

from __future__ import annotations

import math
from datetime import timedelta
from typing import Callable, Optional, Sequence

from src.domain.entities.errors import EmptyUpdate
from src.domain.entities.forecast import (
    CurrentForecast,
    EventRecord,
    ForecastState,
    Prediction,
    PredictionIdFactory,
    PredictionSource,
)

DEFAULT_INTERVAL_MS = 30_000.0
DEFAULT_DURATION_SECONDS = 15.0

_ONE_MS = timedelta(milliseconds=1)


def mean_interval_ms(
    events: Sequence[EventRecord], default: float = DEFAULT_INTERVAL_MS
) -> float:
    """Average spacing between consecutive games, in milliseconds.

    ``events`` is newest-first, so each difference is normally positive; the
    absolute value keeps the result usable if the source ever sends them the
    other way round.
    """
    if len(events) < 2:
        return default

    total = 0.0
    for current, previous in zip(events, events[1:]):
        total += (current.timestamp - previous.timestamp) / _ONE_MS

    return abs(total / (len(events) - 1))


def mean_duration(
    events: Sequence[EventRecord], default: float = DEFAULT_DURATION_SECONDS
) -> float:
    """Unrounded mean of the game durations, in seconds."""
    if not events:
        return default
    return sum(event.duration for event in events) / len(events)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going towards +inf."""
    return math.floor(value + 0.5)


class PredictionEngine:
    """Derive predictions from recent games and keep the rolling log current.

    Every prediction, live or synthetic, goes through :meth:`record`, so the
    history bound and the forecast mirror are maintained in one place.
    """

    def __init__(
        self,
        state: ForecastState,
        id_factory: Optional[Callable[[], int]] = None,
        *,
        default_interval_ms: float = DEFAULT_INTERVAL_MS,
        default_duration: float = DEFAULT_DURATION_SECONDS,
    ) -> None:
        self._state = state
        self._id_factory = id_factory or PredictionIdFactory()
        self._default_interval_ms = default_interval_ms
        self._default_duration = default_duration

    @property
    def state(self) -> ForecastState:
        return self._state

    def next_id(self) -> int:
        return self._id_factory()

    def derive_prediction(self, events: Sequence[EventRecord]) -> Prediction:
        """Build a live prediction from ``events`` and record it.

        Raises:
            EmptyUpdate: If ``events`` is empty, since there is no last game
                to anchor the next one to.
        """
        if not events:
            raise EmptyUpdate()

        interval = mean_interval_ms(events, self._default_interval_ms)
        duration = mean_duration(events, self._default_duration)

        prediction = Prediction(
            id=self.next_id(),
            predicted_time=events[0].timestamp + timedelta(milliseconds=interval),
            predicted_duration=round_half_up(duration),
            source=PredictionSource.LIVE,
        )
        self.record(prediction)
        return prediction

    def record(self, prediction: Prediction) -> None:
        self._state.history.prepend(prediction)
        self._state.forecast = CurrentForecast.from_prediction(prediction)
