"""
Purpose: Orchestrator / decision pipeline (the "glue").
What it does:
Owns the driver registry, the pending request queue and the geohash trie.
Registers and moves drivers, accepts ride requests and resolves each one to
the nearest available, longest idle driver found through a prefix query.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional, Set, Tuple

from drivers.models import Driver, DriverStatus
from drivers.selection import DriverMatch, select_best_driver
from geo.geohash import encode, neighbors, validate_coordinate
from geo.spatial_index import GeohashTrie
from rides.models import RideRequest, RequestStatus, utcnow
from rides.queue import PendingRequestQueue

from .exceptions import DriverNotFound, RequestNotFound
from .policy import DispatchPolicy, default_dispatch_policy
from .state_machines.driver_state import (
    handle_availability_change,
    handle_driver_assignment,
    handle_relocation,
)
from .state_machines.request_state import (
    transition_request_to_expired,
    transition_request_to_matched,
)

logger = logging.getLogger(__name__)

LatLon = Tuple[float, float]


@dataclass(frozen=True)
class MatchResult:
    """
    Outcome of one dispatch attempt.
    A PENDING status means no available driver was found (the request stays queued).
    """
    request_id: int
    status: RequestStatus
    driver_id: Optional[int] = None
    distance_km: Optional[float] = None

    @property
    def matched(self) -> bool:
        return self.status == RequestStatus.MATCHED


@dataclass(frozen=True)
class PendingRequestView:
    request_id: int
    origin: LatLon
    wait_seconds: float


@dataclass(frozen=True)
class DispatchStats:
    total_drivers: int
    available_drivers: int
    pending_requests: int


class Dispatcher:
    """
    Geospatial dispatch engine.

    Every public operation runs under one re-entrant lock, so an assignment
    is never half applied: a driver is either available or assigned.
    """
    def __init__(self, policy: Optional[DispatchPolicy] = None):
        self.policy = policy or default_dispatch_policy()
        self.policy.validate()

        self._drivers: Dict[int, Driver] = {}
        self._driver_geohashes: Dict[int, str] = {}
        self._location_trie = GeohashTrie()
        self._pending = PendingRequestQueue()

        # ids are never reused
        self._next_driver_id = 1
        self._next_request_id = 1

        self._lock = threading.RLock()

    def _encode(self, location: LatLon) -> str:
        return encode(location[0], location[1], self.policy.geohash_precision)

    def _get_driver(self, driver_id: int) -> Driver:
        driver = self._drivers.get(driver_id)
        if driver is None:
            logger.warning(f"Driver #{driver_id} not found!")
            raise DriverNotFound(driver_id)
        return driver

    # --- Drivers ---

    def register_driver(self, latitude: float, longitude: float, now: Optional[datetime] = None) -> int:
        """
        Add a new available driver and index them under their cell code.
        Returns the new driver id.
        """
        validate_coordinate(latitude, longitude)
        now = now or utcnow()

        with self._lock:
            driver_id = self._next_driver_id
            self._next_driver_id += 1

            driver = Driver.new(driver_id, latitude, longitude, DriverStatus.AVAILABLE, last_active_at=now)
            geohash = self._encode(driver.location)

            self._drivers[driver_id] = driver
            self._driver_geohashes[driver_id] = geohash
            self._location_trie.insert(geohash, driver_id)

        logger.info(f"Added driver #{driver_id} at location ({latitude}, {longitude}) with geohash {geohash}")
        return driver_id

    def update_driver_location(self, driver_id: int, latitude: float, longitude: float) -> str:
        """
        Move a driver: remove them at the old cell code, insert at the new one.
        Returns the new cell code.
        """
        validate_coordinate(latitude, longitude)

        with self._lock:
            driver = self._get_driver(driver_id)

            old_geohash = self._driver_geohashes.get(driver_id)
            if old_geohash is not None:
                self._location_trie.remove(old_geohash, driver_id)

            driver = handle_relocation(driver, (latitude, longitude))
            geohash = self._encode(driver.location)

            self._drivers[driver_id] = driver
            self._driver_geohashes[driver_id] = geohash
            self._location_trie.insert(geohash, driver_id)

        logger.info(f"Updated driver #{driver_id} location to ({latitude}, {longitude}) with geohash {geohash}")
        return geohash

    def set_driver_availability(self, driver_id: int, available: bool, now: Optional[datetime] = None) -> Driver:
        now = now or utcnow()

        with self._lock:
            driver = handle_availability_change(self._get_driver(driver_id), available, now)
            self._drivers[driver_id] = driver

        logger.info(f"Set driver #{driver_id} availability to {'available' if available else 'unavailable'}")
        return driver

    def get_driver(self, driver_id: int) -> Driver:
        with self._lock:
            return self._get_driver(driver_id)

    def driver_cell(self, driver_id: int) -> str:
        """
        The cell code the driver is currently indexed under.
        """
        with self._lock:
            self._get_driver(driver_id)
            return self._driver_geohashes[driver_id]

    def drivers_with_prefix(self, prefix: str) -> Set[int]:
        with self._lock:
            return self._location_trie.query(prefix)

    def available_drivers(self) -> List[Driver]:
        with self._lock:
            return [driver for _, driver in sorted(self._drivers.items()) if driver.available]

    def available_driver_count(self) -> int:
        return len(self.available_drivers())

    # --- Requests ---

    def submit_request(self, latitude: float, longitude: float, now: Optional[datetime] = None) -> MatchResult:
        """
        Create a PENDING ride request and try to match it straight away.
        """
        validate_coordinate(latitude, longitude)
        now = now or utcnow()

        with self._lock:
            request_id = self._next_request_id
            self._next_request_id += 1

            request = RideRequest(id=request_id, origin=(latitude, longitude), created_at=now)
            self._pending.enqueue(request)
            logger.info(f"New ride request #{request_id} at location ({latitude}, {longitude})")

            return self.attempt_match(request_id, now=now)

    def candidate_driver_ids(self, location: LatLon) -> Set[int]:
        """
        Union of every driver sharing a search prefix with the location's
        cell code or any of its approximate neighbours.

        The prefix is deliberately coarse, so this can include far away
        drivers. The distance ranking is what picks the right one.
        """
        geohash = self._encode(location)
        prefix_length = self.policy.search_prefix_length

        nearby_geohashes = neighbors(geohash) + [geohash]
        prefixes = {nearby_geohash[:prefix_length] for nearby_geohash in nearby_geohashes}

        candidate_ids: Set[int] = set()
        with self._lock:
            for prefix in prefixes:
                candidate_ids |= self._location_trie.query(prefix)
        return candidate_ids

    def attempt_match(self, request_id: int, now: Optional[datetime] = None) -> MatchResult:
        """
        Look for the best available driver for a pending request.
        On success the driver is marked BUSY and the request leaves the queue
        as MATCHED. Otherwise it stays PENDING.
        """
        now = now or utcnow()

        with self._lock:
            request = self._pending.get(request_id)
            if request is None:
                logger.warning(f"Ride request #{request_id} not found!")
                raise RequestNotFound(request_id)

            logger.info(f"Matching ride request #{request_id} with geohash {self._encode(request.origin)}")

            candidates = [
                self._drivers[driver_id]
                for driver_id in self.candidate_driver_ids(request.origin)
                if driver_id in self._drivers
            ]

            best_match: Optional[DriverMatch] = select_best_driver(
                candidates,
                request.origin,
                tie_tolerance_km=self.policy.tie_tolerance_km
            )

            if best_match is None:
                logger.info(f"No available drivers found for ride request #{request_id}")
                return MatchResult(request_id=request_id, status=RequestStatus.PENDING)

            # Assign the driver, then close the request
            self._drivers[best_match.driver_id] = handle_driver_assignment(self._drivers[best_match.driver_id])
            transition_request_to_matched(request, best_match.driver_id, now)
            self._pending.remove(request_id)

        logger.info(
            f"Matched ride request #{request_id} with driver #{best_match.driver_id} "
            f"(distance: {best_match.distance_km:.2f} km)"
        )
        return MatchResult(
            request_id=request_id,
            status=RequestStatus.MATCHED,
            driver_id=best_match.driver_id,
            distance_km=best_match.distance_km,
        )

    def sweep_expired(self, now: Optional[datetime] = None) -> List[RideRequest]:
        """
        Pull-based expiry pass: every pending request strictly older than the
        timeout becomes EXPIRED and leaves the queue. Returns the expired requests.
        """
        now = now or utcnow()

        with self._lock:
            expired = self._pending.collect_expired(self.policy.request_timeout_seconds, now)
            for request in expired:
                wait_seconds = request.age_seconds(now)
                transition_request_to_expired(request, now)
                self._pending.remove(request.id)
                logger.info(f"Ride request #{request.id} expired after waiting for {wait_seconds:.0f} seconds")

        return expired

    def pending_requests(self, now: Optional[datetime] = None) -> List[PendingRequestView]:
        now = now or utcnow()
        with self._lock:
            return [
                PendingRequestView(request_id=request.id, origin=request.origin, wait_seconds=request.age_seconds(now))
                for request in self._pending.pending()
            ]

    def stats(self) -> DispatchStats:
        with self._lock:
            return DispatchStats(
                total_drivers=len(self._drivers),
                available_drivers=self.available_driver_count(),
                pending_requests=len(self._pending),
            )
