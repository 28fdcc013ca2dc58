"""Unit tests for clocks."""

from datetime import UTC, datetime, timedelta

from curbside.util.clock import ManualClock, SystemClock


def test_system_clock_is_timezone_aware():
    assert SystemClock().now().tzinfo is not None


def test_manual_clock_moves_only_when_told():
    """ManualClock stays put until advanced or set."""
    start = datetime(2024, 1, 1, tzinfo=UTC)
    clock = ManualClock(start)

    assert clock.now() == start
    assert clock.advance(timedelta(hours=25)) == start + timedelta(hours=25)

    clock.set(start)
    assert clock.now() == start
