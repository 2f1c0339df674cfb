"""
Purpose: Statistics output for the presentation layer.
What it does:
Formats waiting times and idle times the way operators read them, and
builds the statistics block (available driver table, totals, pending waits).
Returns text only; printing is the caller's business.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from rides.models import utcnow

from .dispatcher import Dispatcher

_TABLE_RULE = "+------+--------------+--------------+------------------+"


def format_wait_time(seconds: float) -> str:
    """
    "42 seconds" under a minute, otherwise "3 minutes 5 seconds".
    """
    seconds = int(seconds)
    if seconds < 60:
        return f"{seconds} seconds"
    return f"{seconds // 60} minutes {seconds % 60} seconds"


def format_last_active(seconds: float) -> str:
    seconds = int(seconds)
    if seconds < 60:
        return f"{seconds} seconds ago"
    if seconds < 3600:
        return f"{seconds // 60} minutes ago"
    return f"{seconds // 3600} hours ago"


def render_stats(dispatcher: Dispatcher, now: Optional[datetime] = None) -> str:
    now = now or utcnow()
    stats = dispatcher.stats()

    lines: List[str] = [
        "--- System Statistics ---",
        f"Total Drivers: {stats.total_drivers}",
        "Available Drivers:",
        _TABLE_RULE,
        f"| {'ID':>4} | {'Latitude':>12} | {'Longitude':>12} | {'Last active':>16} |",
        _TABLE_RULE,
    ]
    for driver in dispatcher.available_drivers():
        latitude, longitude = driver.location
        idle = format_last_active((now - driver.last_active_at).total_seconds()) if driver.last_active_at else "-"
        lines.append(f"| {driver.id:>4} | {latitude:>12.6f} | {longitude:>12.6f} | {idle:>16} |")
    lines.append(_TABLE_RULE)

    lines.append(f"Total Available Drivers : {stats.available_drivers}")
    lines.append(f"Pending Ride Requests: {stats.pending_requests}")

    pending = dispatcher.pending_requests(now)
    if pending:
        lines.append("")
        lines.append("Pending Requests:")
        for view in pending:
            lines.append(f"  Request #{view.request_id} - Waiting for {format_wait_time(view.wait_seconds)}")

    return "\n".join(lines)
