from datetime import date, datetime

import pytest

from roster.adapters.clock import FrozenClock
from roster.domain.entities import Person
from roster.domain.sample_data import build_sample_people

# Reference "today" used by the documented sample query
REFERENCE_DAY = date(2018, 12, 20)


@pytest.fixture
def reference_day() -> date:
    return REFERENCE_DAY


@pytest.fixture
def frozen_clock() -> FrozenClock:
    return FrozenClock(datetime(2018, 12, 20, 9, 30))


@pytest.fixture
def sample_people(frozen_clock: FrozenClock) -> list[Person]:
    """
    The eight-person sample roster, stamped with the frozen clock.
    """
    return build_sample_people(frozen_clock)
