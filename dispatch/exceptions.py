"""
Purpose: Reported conditions of the dispatch engine.
None of these are fatal: the engine state is left untouched when they are raised.
"""


class DispatchError(Exception):
    """Base class for dispatch engine errors."""
    pass


class DriverNotFound(DispatchError):
    """Raised when an operation references a driver id that was never registered."""

    def __init__(self, driver_id: int):
        self.driver_id = driver_id
        super().__init__(f"Driver #{driver_id} not found")


class RequestNotFound(DispatchError):
    """Raised when a match is attempted on an unknown or already resolved request."""

    def __init__(self, request_id: int):
        self.request_id = request_id
        super().__init__(f"Ride request #{request_id} not found")
