from dataclasses import replace
from datetime import datetime
from typing import Tuple

from drivers.models import Driver, DriverStatus

LatLon = Tuple[float, float]


class DriverStateException(Exception):
    """Raised when an invalid driver transition is attempted."""
    pass


def handle_driver_assignment(driver: Driver) -> Driver:
    """
    Called when the matcher picks this driver for a request.
    An assigned driver stays BUSY until availability is switched back on.
    """
    if driver.status != DriverStatus.AVAILABLE:
        raise DriverStateException(f"Driver {driver.id} cannot be assigned while {driver.status.value}")

    # Because Driver is a frozen dataclass, we must return a new instance via replace
    return replace(driver, status=DriverStatus.BUSY)


def handle_availability_change(driver: Driver, available: bool, now: datetime) -> Driver:
    """
    Flip the availability flag.
    The idle clock restarts only when a BUSY driver becomes AVAILABLE, so
    re-confirming availability does not cost a driver their place in the tie-break.
    """
    if available:
        if driver.status == DriverStatus.AVAILABLE:
            return driver
        return replace(driver, status=DriverStatus.AVAILABLE, last_active_at=now)

    return replace(driver, status=DriverStatus.BUSY)


def handle_relocation(driver: Driver, location: LatLon) -> Driver:
    """
    Move the driver. Status and idle clock are unchanged.
    """
    return replace(driver, location=location)
