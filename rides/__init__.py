"""
Ride requests domain package.

Public API:
- Domain models: RideRequest, RequestStatus
- Pending registry: PendingRequestQueue, QueueStats
"""
from .models import RideRequest, RequestStatus
from .queue import PendingRequestQueue, QueueStats

__all__ = ["RideRequest",
           "RequestStatus",
             "PendingRequestQueue",
               "QueueStats"
               ]
