"""
Purpose: Core data models for the drivers domain.
What it does:
Defines the structure of a Driver and their status without tying them to any storage.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Tuple

LatLon = Tuple[float, float]


class DriverStatus(str, Enum):
    """
    The two states the matching engine cares about.
    BUSY means the driver is on exactly one outstanding trip.
    """
    AVAILABLE = "available"
    BUSY = "busy"


@dataclass(frozen=True)
class Driver:
    """
    A purely stateless representation of a Driver at a specific point in time.
    The dispatcher swaps in a new instance on every change.
    """
    id: int
    location: LatLon
    status: DriverStatus

    # Used to break distance ties in favour of the longest idle driver.
    last_active_at: datetime | None = None

    @property
    def available(self) -> bool:
        return self.status == DriverStatus.AVAILABLE

    @classmethod
    def new(
        cls,
        driver_id: int,
        lat: float,
        lon: float,
        status: str | DriverStatus = DriverStatus.AVAILABLE,
        last_active_at: datetime | None = None
    ) -> Driver:
        if isinstance(status, str):
            status = DriverStatus(status)

        return cls(
            id=driver_id,
            location=(lat, lon),
            status=status,
            last_active_at=last_active_at or datetime.now(timezone.utc)
        )
