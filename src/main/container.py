"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

import random
from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from src.application.models import SystemInfo
from src.application.use_cases.forecast_use_cases import (
    GetForecastSnapshotUseCase,
    GetPredictionHistoryUseCase,
    TriggerManualPredictionUseCase,
)
from src.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from src.application.use_cases.prediction_cycle_use_case import (
    RunPredictionCycleUseCase,
)
from src.domain.entities.forecast import (
    ForecastState,
    PredictionHistory,
    PredictionIdFactory,
)
from src.domain.services.fallback_generator import FallbackGenerator
from src.domain.services.prediction_engine import PredictionEngine
from src.infrastructure.gateways.recent_games_gateway import RecentGamesGateway
from src.infrastructure.services.health_check_service import HealthCheckService
from src.infrastructure.services.polling_scheduler import PollingScheduler
from src.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


def _join_url(base_url: str, path: str) -> str:
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()

    # Domain state, shared by the writer (cycle) and the readers (use cases)
    prediction_history = providers.Singleton(
        PredictionHistory,
        limit=config.polling.history_limit,
    )

    forecast_state = providers.Singleton(
        ForecastState,
        history=prediction_history,
    )

    prediction_id_factory = providers.Singleton(PredictionIdFactory)

    fallback_rng = providers.Singleton(random.Random, config.polling.fallback_seed)

    # Gateways
    recent_games_gateway = providers.Singleton(
        RecentGamesGateway,
        base_url=config.game_api.base_url,
        path=config.game_api.recent_games_path,
        timeout=config.game_api.timeout_seconds,
    )

    # Domain services
    prediction_engine = providers.Singleton(
        PredictionEngine,
        state=forecast_state,
        id_factory=prediction_id_factory,
        default_interval_ms=config.polling.default_interval_ms,
        default_duration=config.polling.default_duration_seconds,
    )

    fallback_generator = providers.Singleton(
        FallbackGenerator,
        rng=fallback_rng,
        id_factory=prediction_id_factory,
        min_delay_seconds=config.polling.fallback_min_delay_seconds,
        max_delay_seconds=config.polling.fallback_max_delay_seconds,
        min_duration_seconds=config.polling.fallback_min_duration_seconds,
        max_duration_seconds=config.polling.fallback_max_duration_seconds,
    )

    # Application (use cases)
    prediction_cycle_use_case = providers.Singleton(
        RunPredictionCycleUseCase,
        gateway=recent_games_gateway,
        engine=prediction_engine,
        fallback_generator=fallback_generator,
        state=forecast_state,
        error_message=config.polling.error_message,
    )

    # Infrastructure services
    polling_scheduler = providers.Singleton(
        PollingScheduler,
        cycle_use_case=prediction_cycle_use_case,
        interval_seconds=config.polling.interval_seconds,
    )

    health_check_service = providers.Singleton(
        HealthCheckService,
        state=forecast_state,
        scheduler=polling_scheduler,
        recent_games_url=providers.Callable(
            _join_url, config.game_api.base_url, config.game_api.recent_games_path
        ),
    )

    system_info = providers.Singleton(
        SystemInfo,
        title=config.service.title,
        description=config.service.description,
        version=config.service.version,
        environment=providers.Callable(
            lambda env: env.value if hasattr(env, "value") else str(env),
            config.environment,
        ),
        recent_games_url=providers.Callable(
            _join_url, config.game_api.base_url, config.game_api.recent_games_path
        ),
        polling_interval_seconds=config.polling.interval_seconds,
        history_limit=config.polling.history_limit,
    )

    get_forecast_snapshot_use_case = providers.Factory(
        GetForecastSnapshotUseCase,
        state=forecast_state,
        scheduler=polling_scheduler,
    )

    get_prediction_history_use_case = providers.Factory(
        GetPredictionHistoryUseCase,
        state=forecast_state,
    )

    trigger_manual_prediction_use_case = providers.Factory(
        TriggerManualPredictionUseCase,
        scheduler=polling_scheduler,
    )

    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        health_check_service=health_check_service,
    )

    get_application_info_use_case = providers.Factory(
        GetApplicationInfoUseCase,
        health_check_service=health_check_service,
        system_info=system_info,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Start the poller for the lifetime of the application.

    The scheduler is stopped on exit, which also cancels a request still
    in flight.
    """
    container = get_container()
    scheduler = container.polling_scheduler()

    try:
        await scheduler.start()
        logger.info("container.resources.initialized")
        yield container

    finally:
        await scheduler.stop()
        logger.info("container.resources.shutdown")
