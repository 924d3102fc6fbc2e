"""
Health domain entities.

The predictor reports on two moving parts: the poller that drives the
prediction cycles and the recent games API that feeds them. Each one gets a
``DependencyStatus``; the overall ``SystemHealth`` is the worst of them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

POLLER_DEPENDENCY = "poller"
RECENT_GAMES_DEPENDENCY = "recent_games_api"


class ServiceStatus(str, Enum):
    """Availability of a dependency or of the whole predictor."""

    UP = "up"
    DEGRADED = "degraded"
    DOWN = "down"
    UNKNOWN = "unknown"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]

    @classmethod
    def worst(cls, statuses: Iterable["ServiceStatus"]) -> "ServiceStatus":
        """Most severe status; ``UP`` when nothing was reported."""
        return max(statuses, key=lambda status: status.severity, default=cls.UP)


# down > degraded > unknown > up
_SEVERITY = {
    ServiceStatus.UP: 0,
    ServiceStatus.UNKNOWN: 1,
    ServiceStatus.DEGRADED: 2,
    ServiceStatus.DOWN: 3,
}


@dataclass(slots=True)
class DependencyStatus:
    """State of the poller or of the recent games API at check time."""

    name: str
    status: ServiceStatus
    message: Optional[str] = None
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    details: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class SystemHealth:
    status: ServiceStatus
    dependencies: List[DependencyStatus] = field(default_factory=list)

    @classmethod
    def from_dependencies(cls, dependencies: List[DependencyStatus]) -> "SystemHealth":
        status = ServiceStatus.worst(dep.status for dep in dependencies)
        return cls(status=status, dependencies=dependencies)

    def dependency(self, name: str) -> Optional[DependencyStatus]:
        return next((dep for dep in self.dependencies if dep.name == name), None)


@dataclass(slots=True)
class ApplicationInfo:
    """What ``/info`` reports: identity, uptime and the polling setup."""

    name: str
    description: str
    version: str
    environment: str
    started_at: datetime
    uptime_seconds: float
    status: ServiceStatus
    extras: Dict[str, Any] = field(default_factory=dict)
