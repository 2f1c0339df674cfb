from datetime import timedelta

import pytest

from dispatch.reporting import format_last_active, format_wait_time, render_stats


@pytest.mark.parametrize("seconds, expected", [
    (0, "0 seconds"),
    (59.9, "59 seconds"),
    (60, "1 minutes 0 seconds"),
    (185, "3 minutes 5 seconds"),
])
def test_format_wait_time(seconds, expected):
    assert format_wait_time(seconds) == expected


@pytest.mark.parametrize("seconds, expected", [
    (5, "5 seconds ago"),
    (120, "2 minutes ago"),
    (3599, "59 minutes ago"),
    (7200, "2 hours ago"),
])
def test_format_last_active(seconds, expected):
    assert format_last_active(seconds) == expected


def test_render_stats(dispatcher, t0):
    dispatcher.register_driver(12.9716, 77.5946, now=t0)
    busy = dispatcher.register_driver(12.9800, 77.6000, now=t0)
    dispatcher.set_driver_availability(busy, False, now=t0)
    dispatcher.submit_request(40.7128, -74.0060, now=t0)

    text = render_stats(dispatcher, now=t0 + timedelta(seconds=90))

    assert "Total Drivers: 2" in text
    assert "Total Available Drivers : 1" in text
    assert "Pending Ride Requests: 1" in text
    assert "12.971600" in text
    assert "12.980000" not in text
    assert "1 minutes ago" in text
    assert "Request #1 - Waiting for 1 minutes 30 seconds" in text


def test_render_stats_without_pending(dispatcher, t0):
    text = render_stats(dispatcher, now=t0)

    assert "Pending Ride Requests: 0" in text
    assert "Pending Requests:" not in text
