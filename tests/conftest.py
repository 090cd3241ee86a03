import pytest

from tests.helpers import make_map


@pytest.fixture
def open_map():
    return make_map(["1111", "1111", "1111", "1111"])


@pytest.fixture
def gated_map():
    # row 1 blocked except column 0
    return make_map(["1111", "1000", "1111", "1111"])


@pytest.fixture
def walled_goal_map():
    return make_map(["1111", "1111", "1110", "1101"])


@pytest.fixture
def ring_map():
    # two equal-length routes around the blocked centre
    return make_map(["111", "101", "111"])
