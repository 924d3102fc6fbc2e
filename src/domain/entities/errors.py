"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class FetchFailure(DomainError):
    """Raised when recent games cannot be obtained from the data source.

    Covers transport errors, non-2xx responses, undecodable bodies and
    payloads without a usable ``games`` list. Recovered by the fallback path.
    """


class EmptyUpdate(DomainError):
    """Raised when the data source answered correctly but had no games.

    Not a failure: the cycle simply produces nothing new.
    """

    def __init__(
        self,
        message: str = "No game data available",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
