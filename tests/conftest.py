from typing import List

import pytest

from load_scheduler.models import Load, Point

PROBLEM_TEXT = """loadNumber pickup dropoff
A (1,0) (2,0)
B (5, 0) (6, 0)

C (100,0) (101,0)
"""


def make_load(load_id: str, pickup: tuple, dropoff: tuple) -> Load:
    return Load(load_id, Point(*pickup), Point(*dropoff))


@pytest.fixture
def scenario_loads() -> List[Load]:
    """Two short loads that fit one shift and one load too long for any."""
    return [
        make_load("A", (1, 0), (2, 0)),
        make_load("B", (5, 0), (6, 0)),
        make_load("C", (100, 0), (101, 0)),
    ]


@pytest.fixture
def problem_file(tmp_path):
    path = tmp_path / "problem.txt"
    path.write_text(PROBLEM_TEXT)
    return path
