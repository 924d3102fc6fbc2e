"""Use case running one fetch-and-predict cycle."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Optional

from src.domain.entities.errors import EmptyUpdate, FetchFailure
from src.domain.entities.forecast import ForecastState, Prediction
from src.domain.gateways.recent_games_gateway import IRecentGamesGateway
from src.domain.services.fallback_generator import FallbackGenerator
from src.domain.services.prediction_engine import PredictionEngine
from src.shared import get_logger
from src.shared.consts import DEFAULT_FALLBACK_ERROR_MESSAGE

logger = get_logger(__name__)


class RunPredictionCycleUseCase:
    """Fetch recent games and refresh the forecast.

    Live data goes through the prediction engine. A failed fetch sets the
    error message and records a fallback prediction instead. An empty games
    list leaves everything as it was.
    """

    def __init__(
        self,
        gateway: IRecentGamesGateway,
        engine: PredictionEngine,
        fallback_generator: FallbackGenerator,
        state: ForecastState,
        *,
        error_message: str = DEFAULT_FALLBACK_ERROR_MESSAGE,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._gateway = gateway
        self._engine = engine
        self._fallback_generator = fallback_generator
        self._state = state
        self._error_message = error_message
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    async def execute(self) -> Optional[Prediction]:
        self._state.clear_error()
        self._state.last_cycle_at = self._clock()

        try:
            events = await self._gateway.fetch_recent_events()
            prediction = self._engine.derive_prediction(events)
        except EmptyUpdate:
            logger.info("prediction.cycle.no_update")
            return None
        except FetchFailure as exc:
            logger.warning(
                "prediction.cycle.fetch_failed",
                error=exc.message,
                details=exc.details,
            )
            return self.apply_fallback()

        self._state.last_success_at = self._state.last_cycle_at
        logger.info(
            "prediction.cycle.live",
            prediction_id=prediction.id,
            events=len(events),
            predicted_time=prediction.predicted_time.isoformat(),
            predicted_duration=prediction.predicted_duration,
        )
        return prediction

    def apply_fallback(self) -> Prediction:
        """Flag the cycle as failed and record a synthetic prediction."""
        self._state.fail(self._error_message)
        prediction = self._fallback_generator.generate()
        self._engine.record(prediction)
        logger.info(
            "prediction.cycle.fallback",
            prediction_id=prediction.id,
            predicted_time=prediction.predicted_time.isoformat(),
            predicted_duration=prediction.predicted_duration,
        )
        return prediction
