from scripts.generate_mock_drivers import BASE_LAT, BASE_LON, generate_mock_drivers
from scripts.run_dispatch_simulation import load_drivers, run_simulation


def test_generate_and_load_drivers(tmp_path):
    """
    Generated drivers land around the city centre and load back as (lat, lon, available) rows.
    """
    path = tmp_path / "drivers.csv"

    df = generate_mock_drivers(str(path), count=50, spread_degrees=0.1, seed=3)
    drivers = load_drivers(str(path))

    assert len(df) == 50
    assert len(drivers) == 50
    for lat, lon, available in drivers:
        assert abs(lat - BASE_LAT) <= 0.0501
        assert abs(lon - BASE_LON) <= 0.0501
        assert isinstance(available, bool)


def test_all_available_when_ratio_is_one(tmp_path):
    path = tmp_path / "drivers.csv"
    generate_mock_drivers(str(path), count=10, available_ratio=1.0, seed=1)

    assert all(available for _, _, available in load_drivers(str(path)))


def test_run_simulation_prints_summary(tmp_path, capsys):
    run_simulation(drivers_path=str(tmp_path / "drivers.csv"), num_requests=5)

    out = capsys.readouterr().out
    assert "=== SIMULATION COMPLETE ===" in out
    assert "--- System Statistics ---" in out
