"""Tests for clock-style input rewriting."""

import pytest

from hourglass.chrono import expand


def test_minutes_and_seconds():
    """Test that MM:SS becomes minutes and seconds."""
    assert expand("3:14") == "3 minutes 14 seconds"


def test_hours_minutes_seconds():
    """Test that H:MM:SS becomes hours, minutes and seconds."""
    assert expand("12:10:14") == "12 hours 10 minutes 14 seconds"


def test_leading_zeros_are_dropped():
    """Test that zero-padded groups are emitted as plain integers."""
    assert expand("4:01:01") == "4 hours 1 minutes 1 seconds"
    assert expand("2:20:00") == "2 hours 20 minutes 0 seconds"


def test_fractional_seconds_are_kept():
    """Test that a fraction on the last group survives."""
    assert expand("1:20.51") == "1 minutes 20.51 seconds"
    assert expand("0:05.25") == "0 minutes 5.25 seconds"


def test_days_group():
    """Test that a fourth group is read as days."""
    assert expand("133:00:00:00") == "133 days 0 hours 0 minutes 0 seconds"


def test_surrounding_spaces_are_ignored():
    """Test that spacing around the groups does not matter."""
    assert expand(" 1 : 20 ") == "1 minutes 20 seconds"


@pytest.mark.parametrize(
    "text",
    [
        "4 hours",
        "20",
        "1:2:3:4:5",
        "1.5:20",
        "1:20 minutes",
        "a:b",
        "",
    ],
)
def test_other_text_passes_through(text):
    """Test that anything not shaped like a clock is returned unchanged."""
    assert expand(text) == text
