import random
from datetime import date

import pytest

from dsu_scheduler.domain.models import Roster, RotationConfig

# 2022-01-03 は月曜日
MONDAY = date(2022, 1, 3)

FIVE = ("Alice Smith", "Bob Jones", "Carol Lee", "Dan Kim", "Eve Park")
EIGHT = FIVE + ("Fay Wong", "Gus Hale", "Hal Ito")


@pytest.fixture
def rng():
    return random.Random(20220103)


@pytest.fixture
def roster5():
    return Roster(FIVE)


@pytest.fixture
def roster8():
    return Roster(EIGHT)


def rotation(days, start=MONDAY):
    return RotationConfig(start_date=start, day_count=days)
