import pytest

from relay_planner.services import build_roster


@pytest.fixture
def abc_roster():
    return build_roster(3, ["A", "B", "C"])
