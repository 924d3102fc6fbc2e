"""
Domain Gateway - Recent Games

This module defines the gateway interface for reading the most recent
games from the remote game-outcome API.
"""

from abc import ABC, abstractmethod
from typing import List

from src.domain.entities.forecast import EventRecord


class IRecentGamesGateway(ABC):
    """Interface for the recent games data source."""

    @abstractmethod
    async def fetch_recent_events(self) -> List[EventRecord]:
        """
        Fetch the latest games, newest first.

        Performs a single request; retrying is left to the polling cadence.

        Returns:
            Non-empty list of event records in the order the source sent them

        Raises:
            FetchFailure: When the source is unreachable or the payload is unusable
            EmptyUpdate: When the source answered with an empty games list
        """
        pass
