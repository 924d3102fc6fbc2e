"""Domain entities for flight predictions and the state they feed."""

from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable, Deque, Iterator, Optional, Tuple

DEFAULT_HISTORY_LIMIT = 10


class PredictionSource(str, Enum):
    """Provenance of a prediction."""

    LIVE = "API"
    FALLBACK = "Fallback"


@dataclass(frozen=True, slots=True)
class EventRecord:
    """One observed game, as delivered by the recent games API."""

    timestamp: datetime
    duration: float


@dataclass(frozen=True, slots=True)
class Prediction:
    """A single prediction for the next flight."""

    id: int
    predicted_time: datetime
    predicted_duration: int
    source: PredictionSource


@dataclass(frozen=True, slots=True)
class CurrentForecast:
    """The forecast currently on display."""

    next_flight_time: Optional[datetime] = None
    flight_duration: Optional[int] = None

    @classmethod
    def from_prediction(cls, prediction: Prediction) -> "CurrentForecast":
        return cls(
            next_flight_time=prediction.predicted_time,
            flight_duration=prediction.predicted_duration,
        )

    @property
    def is_set(self) -> bool:
        return self.next_flight_time is not None


class PredictionHistory:
    """Newest-first log of predictions, bounded to ``limit`` entries."""

    def __init__(self, limit: int = DEFAULT_HISTORY_LIMIT) -> None:
        if limit <= 0:
            raise ValueError("History limit must be positive")
        self._limit = limit
        self._entries: Deque[Prediction] = deque(maxlen=limit)

    @property
    def limit(self) -> int:
        return self._limit

    def prepend(self, prediction: Prediction) -> None:
        # deque(maxlen) drops from the right, i.e. the oldest entry
        self._entries.appendleft(prediction)

    def latest(self) -> Optional[Prediction]:
        return self._entries[0] if self._entries else None

    def snapshot(self) -> Tuple[Prediction, ...]:
        return tuple(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Prediction]:
        return iter(self.snapshot())


class PredictionIdFactory:
    """Hands out unique, strictly increasing millisecond-based ids."""

    def __init__(self, clock_ms: Optional[Callable[[], int]] = None) -> None:
        self._clock_ms = clock_ms or (lambda: time.time_ns() // 1_000_000)
        self._last = 0

    def __call__(self) -> int:
        candidate = self._clock_ms()
        if candidate <= self._last:
            candidate = self._last + 1
        self._last = candidate
        return candidate


@dataclass
class ForecastState:
    """Mutable state shared between the poller and the read side.

    Only the prediction cycle writes to it; everything else reads snapshots.
    """

    history: PredictionHistory = field(default_factory=PredictionHistory)
    forecast: CurrentForecast = field(default_factory=CurrentForecast)
    error: Optional[str] = None
    last_cycle_at: Optional[datetime] = None
    last_success_at: Optional[datetime] = None

    def snapshot_forecast(self) -> CurrentForecast:
        return self.forecast

    def snapshot_history(self) -> Tuple[Prediction, ...]:
        return self.history.snapshot()

    def clear_error(self) -> None:
        self.error = None

    def fail(self, message: str) -> None:
        self.error = message
