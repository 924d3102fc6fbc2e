"""
Gateways Package - Domain Layer

This package contains interfaces defining gateway contracts
for external service communications. Specific implementations
are provided by the infrastructure layer.
"""

from .recent_games_gateway import IRecentGamesGateway

__all__ = ["IRecentGamesGateway"]
