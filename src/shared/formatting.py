"""Display helpers shared by the read-side use cases."""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

UNSET_CLOCK = "--:--:--"
UNSET_DURATION = "--"
UNKNOWN_COUNTDOWN = "Unknown"
DUE_COUNTDOWN = "Now!"


def format_clock(value: Optional[datetime]) -> str:
    """Render a timestamp as HH:MM:SS in its own timezone."""
    if value is None:
        return UNSET_CLOCK
    return value.strftime("%H:%M:%S")


def format_countdown(target: Optional[datetime], now: datetime) -> str:
    """Render the time left until ``target`` as M:SS.

    Whole seconds only; anything already due renders as ``Now!``.
    """
    if target is None:
        return UNKNOWN_COUNTDOWN

    remaining = max(0, int((target - now).total_seconds()))
    if remaining <= 0:
        return DUE_COUNTDOWN

    minutes, seconds = divmod(remaining, 60)
    return f"{minutes}:{seconds:02d}"


def format_duration(seconds: Optional[int]) -> str:
    # zero counts as unset
    if not seconds:
        return UNSET_DURATION
    return f"{seconds} seconds"


def redact_url(url: str) -> str:
    """Strip user and password from a URL before it is exposed."""
    if not url:
        return url

    parsed = urlsplit(url)
    if parsed.username or parsed.password:
        hostname = parsed.hostname or ""
        port_part = f":{parsed.port}" if parsed.port else ""
        netloc = f"{hostname}{port_part}"
        return urlunsplit(
            (parsed.scheme, netloc, parsed.path, parsed.query, parsed.fragment)
        )

    return url
