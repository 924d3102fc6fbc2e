"""Synthetic predictions used when live game data is unavailable."""

from __future__ import annotations

import random
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from src.domain.entities.forecast import Prediction, PredictionIdFactory, PredictionSource

MIN_DELAY_SECONDS = 5
MAX_DELAY_SECONDS = 119
MIN_DURATION_SECONDS = 1
MAX_DURATION_SECONDS = 30


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class FallbackGenerator:
    """Produce bounded random predictions.

    Both ranges are inclusive. The random source and the clock are injected
    so tests can pin them down.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], datetime]] = None,
        id_factory: Optional[Callable[[], int]] = None,
        *,
        min_delay_seconds: int = MIN_DELAY_SECONDS,
        max_delay_seconds: int = MAX_DELAY_SECONDS,
        min_duration_seconds: int = MIN_DURATION_SECONDS,
        max_duration_seconds: int = MAX_DURATION_SECONDS,
    ) -> None:
        if min_delay_seconds > max_delay_seconds:
            raise ValueError("min_delay_seconds cannot exceed max_delay_seconds")
        if min_duration_seconds > max_duration_seconds:
            raise ValueError("min_duration_seconds cannot exceed max_duration_seconds")

        self._rng = rng or random.Random()
        self._clock = clock or _utc_now
        self._id_factory = id_factory or PredictionIdFactory()
        self._delay_range = (min_delay_seconds, max_delay_seconds)
        self._duration_range = (min_duration_seconds, max_duration_seconds)

    def generate(self) -> Prediction:
        delay = self._rng.randint(*self._delay_range)
        duration = self._rng.randint(*self._duration_range)

        return Prediction(
            id=self._id_factory(),
            predicted_time=self._clock() + timedelta(seconds=delay),
            predicted_duration=duration,
            source=PredictionSource.FALLBACK,
        )
