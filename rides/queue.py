"""
Purpose: Owns the set of PENDING ride requests.
What it does:
- Keeps pending requests in arrival order, keyed by id
- Provides operations:
   - enqueue(request)
   - get(request_id)
   - remove(request_id)
   - pending()
   - collect_expired(timeout, now)

Rule: Queue owns membership and timing rules; the dispatcher owns transitions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional

from .models import RideRequest, RequestStatus, utcnow


@dataclass
class QueueStats:
    pending_count: int
    oldest_wait_seconds: Optional[float]
    now: datetime = field(default_factory=utcnow)


@dataclass
class PendingRequestQueue:
    """
    In-memory registry of requests waiting for a driver.

    A request leaves the queue once (matched or expired) and never comes back.
    """
    _requests: Dict[int, RideRequest] = field(default_factory=dict)  # pending requests by id, insertion ordered

    # --- Public API ---

    def __len__(self) -> int:
        return len(self._requests)

    def __contains__(self, request_id: int) -> bool:
        return request_id in self._requests

    def enqueue(self, request: RideRequest) -> None:
        """
        Add a PENDING request. Enqueueing an id that is already pending is a no-op.
        """
        if request.id in self._requests:
            #idempotency : dont double insert
            return
        if request.status != RequestStatus.PENDING:
            raise ValueError(f"Only PENDING requests can be queued, request {request.id} is {request.status}")
        self._requests[request.id] = request

    def get(self, request_id: int) -> Optional[RideRequest]:
        return self._requests.get(request_id)

    def remove(self, request_id: int) -> Optional[RideRequest]:
        return self._requests.pop(request_id, None)

    def pending(self) -> List[RideRequest]:
        return list(self._requests.values())

    def collect_expired(self, timeout_seconds: float, now: Optional[datetime] = None) -> List[RideRequest]:
        """
        Requests whose age is strictly greater than timeout_seconds.
        Does not remove them; the caller transitions and removes.
        """
        now = now or utcnow()
        return [
            request for request in self._requests.values()
            if request.is_expired(timeout_seconds, now)
        ]

    def wait_seconds(self, request_id: int, now: Optional[datetime] = None) -> Optional[float]:
        """
        How long a pending request has been waiting.
        """
        request = self._requests.get(request_id)
        if not request:
            return None
        return request.age_seconds(now)

    def stats(self, now: Optional[datetime] = None) -> QueueStats:
        now = now or utcnow()
        waits = [request.age_seconds(now) for request in self._requests.values()]
        return QueueStats(
            pending_count=len(self._requests),
            oldest_wait_seconds=max(waits) if waits else None,
            now=now
        )
