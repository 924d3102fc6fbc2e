"""Domain port for the component driving prediction cycles."""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class SchedulerState(str, Enum):
    """Whether a prediction cycle is currently running."""

    IDLE = "idle"
    FETCHING = "fetching"


class IPredictionScheduler(Protocol):
    """Defines how the read side observes and nudges the poller."""

    @property
    def state(self) -> SchedulerState:
        """Current cycle state."""
        ...

    @property
    def loading(self) -> bool:
        """True while a manually requested cycle is outstanding."""
        ...

    @property
    def running(self) -> bool:
        """True while the recurring timer is armed."""
        ...

    def request_manual(self) -> bool:
        """Start a manual cycle in the background.

        Returns:
            True when the request joined a cycle that was already running.
        """
        ...

    async def trigger_manual(self) -> None:
        """Run a manual cycle and wait for it to finish."""
        ...
