"""
Drivers domain package.

Public API:
- Domain models: Driver, DriverStatus
- Selection: filter_eligible_drivers, select_best_driver, DriverMatch
"""
from .models import Driver, DriverStatus
from .selection import DriverMatch, filter_eligible_drivers, select_best_driver

__all__ = ["Driver",
           "DriverStatus",
             "DriverMatch",
               "filter_eligible_drivers",
               "select_best_driver"
               ]
