"""Use cases behind ``/health`` and ``/info``."""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from src.application.dtos.health_dto import ApplicationInfoDTO, SystemHealthDTO
from src.application.models import SystemInfo
from src.domain.entities.health import ApplicationInfo
from src.domain.ports.health_check import IHealthCheckService
from src.shared.formatting import redact_url


class GetHealthStatusUseCase:
    """Report the poller and recent games API status as a DTO."""

    def __init__(self, health_check_service: IHealthCheckService) -> None:
        self._health_check_service = health_check_service

    async def execute(self) -> SystemHealthDTO:
        return SystemHealthDTO.from_domain(await self._health_check_service.evaluate())


class GetApplicationInfoUseCase:
    """Describe the running predictor.

    The overall status is taken from the same health evaluation as
    ``/health``, so both endpoints agree. The polling setup is exposed under
    ``extras`` with any credentials stripped from the source URL.
    """

    def __init__(
        self,
        health_check_service: IHealthCheckService,
        system_info: SystemInfo,
    ) -> None:
        self._health_check_service = health_check_service
        self._info = system_info

    async def execute(self, started_at: Optional[datetime]) -> ApplicationInfoDTO:
        now = datetime.now(timezone.utc)
        started = started_at or now
        system_health = await self._health_check_service.evaluate()

        info = ApplicationInfo(
            name=self._info.title,
            description=self._info.description,
            version=self._info.version,
            environment=self._info.environment,
            started_at=started,
            uptime_seconds=max(0.0, (now - started).total_seconds()),
            status=system_health.status,
            extras=self._polling_extras(),
        )
        return ApplicationInfoDTO.from_domain(info)

    def _polling_extras(self) -> Dict[str, Any]:
        return {
            "recent_games_url": redact_url(self._info.recent_games_url),
            "polling_interval_seconds": self._info.polling_interval_seconds,
            "history_limit": self._info.history_limit,
        }
