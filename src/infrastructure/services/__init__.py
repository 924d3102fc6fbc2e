"""Infrastructure services package."""

from .health_check_service import HealthCheckService
from .polling_scheduler import PollingScheduler

__all__ = ["HealthCheckService", "PollingScheduler"]
