import pytest
from whenever import Instant


@pytest.fixture
def fixed_time():
    """Provide a fixed time for testing."""
    return Instant.from_utc(2025, 1, 1, 12, 0, 0)


@pytest.fixture
def now_func(fixed_time):
    """Clock returning the fixed time (years up to 2029 are plausible)."""
    return lambda: fixed_time
