from __future__ import annotations

import asyncio
import random
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import List, Optional, Sequence

import pytest

from src.application.use_cases.prediction_cycle_use_case import (
    RunPredictionCycleUseCase,
)
from src.domain.entities.forecast import (
    EventRecord,
    ForecastState,
    PredictionHistory,
    PredictionIdFactory,
)
from src.domain.gateways.recent_games_gateway import IRecentGamesGateway
from src.domain.services.fallback_generator import FallbackGenerator
from src.domain.services.prediction_engine import PredictionEngine

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

FIXED_NOW = datetime(2024, 6, 10, 6, 13, 20, tzinfo=timezone.utc)


def ms(value: int) -> datetime:
    """Epoch milliseconds as an aware datetime."""
    return datetime(1970, 1, 1, tzinfo=timezone.utc) + timedelta(milliseconds=value)


class StubGateway(IRecentGamesGateway):
    """Gateway returning canned events, or raising a canned error."""

    def __init__(
        self,
        events: Optional[Sequence[EventRecord]] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.events = list(events or [])
        self.error = error
        self.calls = 0
        self.release: Optional[asyncio.Event] = None

    async def fetch_recent_events(self) -> List[EventRecord]:
        self.calls += 1
        if self.release is not None:
            await self.release.wait()
        if self.error is not None:
            raise self.error
        return list(self.events)


@pytest.fixture()
def sample_events() -> List[EventRecord]:
    return [
        EventRecord(timestamp=ms(100_000), duration=10),
        EventRecord(timestamp=ms(70_000), duration=12),
        EventRecord(timestamp=ms(40_000), duration=15),
    ]


@pytest.fixture()
def forecast_state() -> ForecastState:
    return ForecastState(history=PredictionHistory(limit=10))


@pytest.fixture()
def id_factory() -> PredictionIdFactory:
    counter = iter(range(1, 10_000))
    return PredictionIdFactory(clock_ms=lambda: next(counter))


@pytest.fixture()
def engine(forecast_state: ForecastState, id_factory) -> PredictionEngine:
    return PredictionEngine(forecast_state, id_factory)


@pytest.fixture()
def fallback_generator(id_factory) -> FallbackGenerator:
    return FallbackGenerator(
        rng=random.Random(42), clock=lambda: FIXED_NOW, id_factory=id_factory
    )


@pytest.fixture()
def stub_gateway(sample_events) -> StubGateway:
    return StubGateway(sample_events)


@pytest.fixture()
def cycle_use_case(
    stub_gateway: StubGateway,
    engine: PredictionEngine,
    fallback_generator: FallbackGenerator,
    forecast_state: ForecastState,
) -> RunPredictionCycleUseCase:
    return RunPredictionCycleUseCase(
        stub_gateway,
        engine,
        fallback_generator,
        forecast_state,
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture()
def dummy_now() -> datetime:
    return FIXED_NOW
