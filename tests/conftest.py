from datetime import datetime, timezone

import pytest

from dispatch.dispatcher import Dispatcher


@pytest.fixture
def t0():
    return datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def bangalore():
    # (lat, lon) of the city centre
    return (12.9716, 77.5946)


@pytest.fixture
def dispatcher():
    return Dispatcher()
