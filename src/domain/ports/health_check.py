"""Domain service abstraction for health checks."""

from __future__ import annotations

from typing import Protocol

from src.domain.entities.health import SystemHealth


class IHealthCheckService(Protocol):
    """Interface for retrieving the predictor's health."""

    async def evaluate(self) -> SystemHealth:
        """Aggregate the status of the poller and its data source."""
        ...
