import pytest

from pkg_token.adapters.clock import FixedClock

from helpers import NOW


@pytest.fixture
def clock():
    return FixedClock(NOW)
