"""
Purpose: Central configuration for the dispatch engine.
What it does:

Stores all tunable thresholds so behaviour can be tuned without rewriting code:

GEOHASH_PRECISION = 6
REQUEST_TIMEOUT_SECONDS = 300
SEARCH_PREFIX_LENGTH = 3
TIE_TOLERANCE_KM = 0.001

Values can be overridden from the environment (or a .env file):
DISPATCH_GEOHASH_PRECISION=7
DISPATCH_REQUEST_TIMEOUT_SECONDS=120

Rule: No logic here, just parameters.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from geo.geohash import MAX_PRECISION, MIN_PRECISION


@dataclass(frozen=True)
class DispatchPolicy:
    """
    Central configuration for geocoding, matching and request expiry.
    """

    # --- Geocoding ---
    # Characters per cell code. Finer precision means smaller cells and
    # more fan-out in the index.
    geohash_precision: int = 6

    # --- Matching ---
    # Prefix length used when querying the index for candidates.
    # Shorter than the precision on purpose: it widens the search so the
    # approximate neighbour set does not cause false negatives.
    search_prefix_length: int = 3

    # Distances differing by less than this (km) are a tie; the longest idle driver wins.
    tie_tolerance_km: float = 0.001

    # --- Expiry ---
    # Pending requests strictly older than this are dropped by the sweep.
    request_timeout_seconds: int = 300

    def validate(self) -> None:
        """
        Basic sanity checks.
        """
        if not MIN_PRECISION <= self.geohash_precision <= MAX_PRECISION:
            raise ValueError(f"geohash_precision must be within [{MIN_PRECISION}, {MAX_PRECISION}]")

        if self.request_timeout_seconds <= 0:
            raise ValueError("request_timeout_seconds must be > 0")

        if not 1 <= self.search_prefix_length <= self.geohash_precision:
            raise ValueError("search_prefix_length must be within [1, geohash_precision]")

        if self.tie_tolerance_km < 0:
            raise ValueError("tie_tolerance_km must be >= 0")


def default_dispatch_policy() -> DispatchPolicy:
    """
    Convenience factory for the default policy.
    """
    p = DispatchPolicy()
    p.validate()
    return p


def policy_from_env() -> DispatchPolicy:
    """
    Build a policy from DISPATCH_* environment variables (a .env file is loaded first).
    Unset variables keep their defaults.
    """
    load_dotenv()
    defaults = DispatchPolicy()

    p = DispatchPolicy(
        geohash_precision=int(os.getenv("DISPATCH_GEOHASH_PRECISION", defaults.geohash_precision)),
        search_prefix_length=int(os.getenv("DISPATCH_SEARCH_PREFIX_LENGTH", defaults.search_prefix_length)),
        tie_tolerance_km=float(os.getenv("DISPATCH_TIE_TOLERANCE_KM", defaults.tie_tolerance_km)),
        request_timeout_seconds=int(os.getenv("DISPATCH_REQUEST_TIMEOUT_SECONDS", defaults.request_timeout_seconds)),
    )
    p.validate()
    return p
