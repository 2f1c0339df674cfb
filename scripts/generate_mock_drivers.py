import numpy as np
import pandas as pd

# Bangalore city centre
BASE_LAT = 12.9716
BASE_LON = 77.5946


def generate_mock_drivers(filename="mock_drivers_100.csv", count=100, spread_degrees=0.15, available_ratio=0.8, seed=None):
    """
    Scatters `count` drivers around the city centre (roughly +/- 8km with the
    default spread) and writes them to CSV: driver_id, lat, lon, available.
    Returns the generated DataFrame.
    """
    rng = np.random.default_rng(seed)

    lats = BASE_LAT + (rng.random(count) - 0.5) * spread_degrees
    lons = BASE_LON + (rng.random(count) - 0.5) * spread_degrees

    # 80% chance of being available by default
    available = rng.random(count) < available_ratio

    drivers = pd.DataFrame({
        "driver_id": [f"DRV-{str(i+1).zfill(3)}" for i in range(count)],
        "lat": np.round(lats, 6),
        "lon": np.round(lons, 6),
        "available": available,
    })
    drivers.to_csv(filename, index=False)

    print(f"Successfully generated {count} mock drivers into '{filename}'.")
    return drivers


if __name__ == "__main__":
    generate_mock_drivers()
