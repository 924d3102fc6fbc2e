"""Infrastructure gateways package."""

from .recent_games_gateway import RecentGamesGateway

__all__ = ["RecentGamesGateway"]
