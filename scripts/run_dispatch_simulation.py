import logging
import os
import random
from datetime import timedelta
from typing import List, Tuple

import pandas as pd

from dispatch.dispatcher import Dispatcher
from dispatch.policy import policy_from_env
from dispatch.reporting import render_stats
from rides.models import utcnow
from scripts.generate_mock_drivers import BASE_LAT, BASE_LON, generate_mock_drivers


def load_drivers(filepath: str) -> List[Tuple[float, float, bool]]:
    """
    Reads a drivers CSV (lat, lon, available columns) into (lat, lon, available) rows.
    """
    df = pd.read_csv(filepath)

    drivers = []
    for _, row in df.iterrows():
        drivers.append((float(row["lat"]), float(row["lon"]), bool(row["available"])))
    return drivers


def run_simulation(drivers_path="mock_drivers_100.csv", num_requests=30, seed=7):
    print("=== STARTING DISPATCH SIMULATION ===")
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    random.seed(seed)

    # 1. Load Data
    if not os.path.exists(drivers_path):
        generate_mock_drivers(drivers_path, seed=seed)
    drivers = load_drivers(drivers_path)

    # 2. Configure System
    dispatcher = Dispatcher(policy_from_env())
    start = utcnow()

    for lat, lon, available in drivers:
        driver_id = dispatcher.register_driver(lat, lon, now=start)
        if not available:
            dispatcher.set_driver_availability(driver_id, False, now=start)
    print(f"Loaded {len(drivers)} Drivers ({dispatcher.available_driver_count()} available).\n")

    # 3. Fire ride requests one second apart
    matched = 0
    for i in range(num_requests):
        lat = BASE_LAT + (random.random() - 0.5) * 0.1
        lon = BASE_LON + (random.random() - 0.5) * 0.1
        result = dispatcher.submit_request(lat, lon, now=start + timedelta(seconds=i))

        if result.matched:
            matched += 1
            print(f"[SUCCESS] Request #{result.request_id} -> Driver #{result.driver_id} ({result.distance_km:.2f} km)")
        else:
            print(f"[WAITING] Request #{result.request_id} -> No driver available")

    # 4. Let the leftovers age out
    later = start + timedelta(seconds=dispatcher.policy.request_timeout_seconds + num_requests + 1)
    expired = dispatcher.sweep_expired(now=later)

    print("\n=== SIMULATION COMPLETE ===")
    print(f"Requests Matched: {matched} / {num_requests}")
    print(f"Requests Expired: {len(expired)}")
    print()
    print(render_stats(dispatcher, now=later))


if __name__ == "__main__":
    run_simulation()
