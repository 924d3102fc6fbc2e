from __future__ import annotations

from datetime import datetime, timezone

from src.application.dtos.health_dto import ApplicationInfoDTO, SystemHealthDTO
from src.domain.entities.health import (
    ApplicationInfo,
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)


def test_system_health_dto_from_domain() -> None:
    health = SystemHealth(
        status=ServiceStatus.DEGRADED,
        dependencies=[
            DependencyStatus(
                name="recent_games_api",
                status=ServiceStatus.DEGRADED,
                message="Failed to fetch game data. Using fallback prediction.",
                details={"last_success_at": None},
            )
        ],
    )

    dto = SystemHealthDTO.from_domain(health)

    assert dto.status is ServiceStatus.DEGRADED
    assert dto.dependencies[0].details == {"last_success_at": None}


def test_application_info_dto_from_domain() -> None:
    info = ApplicationInfo(
        name="Flight Predictor",
        description="desc",
        version="1.0.0",
        environment="testing",
        started_at=datetime.now(timezone.utc),
        uptime_seconds=5.0,
        status=ServiceStatus.UP,
        extras={"history_limit": 10},
    )

    dto = ApplicationInfoDTO.from_domain(info)

    assert dto.name == "Flight Predictor"
    assert dto.extras["history_limit"] == 10
