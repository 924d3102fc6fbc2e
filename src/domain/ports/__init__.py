"""Domain ports package."""

from .health_check import IHealthCheckService
from .scheduler import IPredictionScheduler, SchedulerState

__all__ = ["IHealthCheckService", "IPredictionScheduler", "SchedulerState"]
