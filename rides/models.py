"""
Purpose: Domain models for the ride requests capability.
What it does:
- Defines core data structures:
- RideRequest (id, origin coords, created_at, status)

Defines enums/constants:
- RequestStatus = PENDING | MATCHED | EXPIRED

Rule: No matching logic, no index access. Models only.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Tuple

LatLon = Tuple[float, float]


class RequestStatus(Enum):
    PENDING = "PENDING"
    MATCHED = "MATCHED"
    EXPIRED = "EXPIRED"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class RideRequest:
    """
    A passenger waiting for a driver at origin.
    Ends in exactly one terminal state: MATCHED or EXPIRED.
    """

    id: int
    origin: LatLon

    created_at: datetime = field(default_factory=utcnow)

    status: RequestStatus = RequestStatus.PENDING

    # filled in on MATCHED
    driver_id: Optional[int] = None
    resolved_at: Optional[datetime] = None

    def age_seconds(self, now: Optional[datetime] = None) -> float:
        now = now or utcnow()
        return (now - self.created_at).total_seconds()

    def is_expired(self, timeout_seconds: float, now: Optional[datetime] = None) -> bool:
        """
        Strictly older than the timeout. A request aged exactly timeout_seconds is still live.
        """
        return self.age_seconds(now) > timeout_seconds
