"""
Infrastructure Gateway - Recent Games Implementation

This module implements the recent games gateway over HTTP. The API returns
``{"games": [{"timestamp": ..., "duration": ...}, ...]}`` newest first.
"""

import math
from datetime import datetime, timezone
from typing import Any, List

import httpx
import structlog

from src.domain.entities.errors import EmptyUpdate, FetchFailure
from src.domain.entities.forecast import EventRecord
from src.domain.gateways.recent_games_gateway import IRecentGamesGateway
from src.shared.consts import DEFAULT_RECENT_GAMES_PATH

logger = structlog.get_logger(__name__)


class RecentGamesGateway(IRecentGamesGateway):
    """Implementation of the recent games gateway using an HTTP client."""

    def __init__(
        self,
        base_url: str,
        path: str = DEFAULT_RECENT_GAMES_PATH,
        timeout: float = 10.0,
    ):
        """
        Initialize the recent games gateway.

        Args:
            base_url: Base URL of the game API (e.g., "https://aviator-api.spribe.io/s")
            path: Path of the recent games resource
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.path = "/" + path.lstrip("/")
        self.timeout = timeout

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.path}"

    async def fetch_recent_events(self) -> List[EventRecord]:
        """Fetch the latest games from the API, newest first."""

        url = self.url
        logger.debug("recent_games.fetch", url=url, timeout=self.timeout)

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, headers={"Accept": "application/json"})
                response.raise_for_status()
                data = response.json()

        except httpx.HTTPStatusError as e:
            logger.error(
                "recent_games.http_error",
                status_code=e.response.status_code,
                url=url,
            )
            raise FetchFailure(
                f"Recent games HTTP error {e.response.status_code}",
                details={"url": url, "status_code": e.response.status_code},
            ) from e

        except httpx.RequestError as e:
            logger.error("recent_games.request_error", error=str(e), url=url)
            raise FetchFailure(
                f"Recent games request failed: {str(e)}", details={"url": url}
            ) from e

        except ValueError as e:
            logger.error("recent_games.invalid_json", error=str(e), url=url)
            raise FetchFailure(
                "Recent games response is not valid JSON", details={"url": url}
            ) from e

        return self._parse_games(data, url)

    def _parse_games(self, data: Any, url: str) -> List[EventRecord]:
        if not isinstance(data, dict) or not isinstance(data.get("games"), list):
            logger.warning("recent_games.games_missing", url=url)
            raise FetchFailure(
                "Recent games response has no games list", details={"url": url}
            )

        games = data["games"]
        if not games:
            logger.info("recent_games.empty", url=url)
            raise EmptyUpdate(details={"url": url})

        events = [self._parse_game(game, index) for index, game in enumerate(games)]

        logger.info("recent_games.parsed", count=len(events))
        return events

    def _parse_game(self, game: Any, index: int) -> EventRecord:
        if not isinstance(game, dict):
            raise FetchFailure(
                "Game entry is not an object", details={"index": index, "game": game}
            )

        try:
            timestamp = parse_timestamp(game.get("timestamp"))
            duration = parse_duration(game.get("duration"))
        except (TypeError, ValueError, OverflowError, OSError) as e:
            logger.warning(
                "recent_games.game_parse_failed",
                index=index,
                game=game,
                error=str(e),
            )
            raise FetchFailure(
                f"Malformed game entry at index {index}: {e}",
                details={"index": index, "game": game},
            ) from e

        if duration < 0:
            logger.warning(
                "recent_games.negative_duration_clamped",
                index=index,
                duration=duration,
            )
            duration = 0.0

        return EventRecord(timestamp=timestamp, duration=duration)


def parse_timestamp(raw: Any) -> datetime:
    """Parse epoch milliseconds or an ISO-8601 string into an aware datetime."""
    if raw is None or isinstance(raw, bool):
        raise ValueError(f"invalid timestamp {raw!r}")

    if isinstance(raw, (int, float)):
        return _from_epoch_ms(raw)

    if isinstance(raw, str):
        text = raw.strip()
        try:
            millis = float(text)
        except ValueError:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
            if parsed.tzinfo is None:
                parsed = parsed.replace(tzinfo=timezone.utc)
            return parsed
        return _from_epoch_ms(millis)

    raise TypeError(f"unsupported timestamp type {type(raw).__name__}")


def parse_duration(raw: Any) -> float:
    """Parse a duration in seconds."""
    if raw is None or isinstance(raw, bool):
        raise ValueError(f"invalid duration {raw!r}")
    value = float(raw)
    if not math.isfinite(value):
        raise ValueError(f"duration is not finite: {raw!r}")
    return value


def _from_epoch_ms(millis: float) -> datetime:
    if not math.isfinite(millis):
        raise ValueError(f"timestamp is not finite: {millis!r}")
    return datetime.fromtimestamp(millis / 1000, tz=timezone.utc)
