from __future__ import annotations

from datetime import timedelta

import pytest

from src.shared.formatting import (
    format_clock,
    format_countdown,
    format_duration,
    redact_url,
)
from tests.conftest import FIXED_NOW


def test_format_clock() -> None:
    assert format_clock(FIXED_NOW) == "06:13:20"
    assert format_clock(None) == "--:--:--"


@pytest.mark.parametrize(
    ("offset", "expected"),
    [
        (timedelta(seconds=125), "2:05"),
        (timedelta(seconds=59, milliseconds=900), "0:59"),
        (timedelta(seconds=1), "0:01"),
        (timedelta(milliseconds=400), "Now!"),
        (timedelta(seconds=-30), "Now!"),
    ],
)
def test_format_countdown(offset, expected) -> None:
    assert format_countdown(FIXED_NOW + offset, FIXED_NOW) == expected


def test_format_countdown_unknown_without_target() -> None:
    assert format_countdown(None, FIXED_NOW) == "Unknown"


def test_format_duration() -> None:
    assert format_duration(12) == "12 seconds"
    assert format_duration(None) == "--"
    assert format_duration(0) == "--"


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://u:p@games.example/s/recent-games", "https://games.example/s/recent-games"),
        ("https://games.example/s/recent-games", "https://games.example/s/recent-games"),
        ("", ""),
    ],
)
def test_redact_url(url, expected) -> None:
    assert redact_url(url) == expected
