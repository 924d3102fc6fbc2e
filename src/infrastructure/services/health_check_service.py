"""Infrastructure implementation for system health checks."""

from __future__ import annotations

from src.domain.entities.forecast import ForecastState
from src.domain.entities.health import (
    POLLER_DEPENDENCY,
    RECENT_GAMES_DEPENDENCY,
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)
from src.domain.ports.health_check import IHealthCheckService
from src.domain.ports.scheduler import IPredictionScheduler
from src.shared.formatting import redact_url


class HealthCheckService(IHealthCheckService):
    """Derive health from the poller and the outcome of the last cycle.

    The data source is not probed separately: the last cycle already tells
    whether it answered.
    """

    def __init__(
        self,
        state: ForecastState,
        scheduler: IPredictionScheduler,
        recent_games_url: str,
    ) -> None:
        self._state = state
        self._scheduler = scheduler
        self._recent_games_url = redact_url(recent_games_url)

    async def evaluate(self) -> SystemHealth:
        return SystemHealth.from_dependencies(
            [self._check_poller(), self._check_recent_games()]
        )

    def _check_poller(self) -> DependencyStatus:
        details = {"state": self._scheduler.state.value}
        if self._scheduler.running:
            return DependencyStatus(
                name=POLLER_DEPENDENCY,
                status=ServiceStatus.UP,
                message="Polling timer armed",
                details=details,
            )
        return DependencyStatus(
            name=POLLER_DEPENDENCY,
            status=ServiceStatus.DOWN,
            message="Polling timer is not running",
            details=details,
        )

    def _check_recent_games(self) -> DependencyStatus:
        details = {
            "url": self._recent_games_url,
            "last_cycle_at": _iso(self._state.last_cycle_at),
            "last_success_at": _iso(self._state.last_success_at),
        }

        if self._state.error:
            status, message = ServiceStatus.DEGRADED, self._state.error
        elif self._state.last_cycle_at is None:
            status, message = ServiceStatus.UNKNOWN, "No cycle has run yet"
        else:
            status, message = ServiceStatus.UP, "Last fetch succeeded"

        return DependencyStatus(
            name=RECENT_GAMES_DEPENDENCY,
            status=status,
            message=message,
            details=details,
        )


def _iso(value) -> str | None:
    return value.isoformat() if value else None
