import math

import pytest

from load_scheduler import utils
from load_scheduler.models import Load, Point, Schedule


def _load() -> Load:
    return Load("1", Point(3, 4), Point(6, 8))


def test_distance_is_euclidean():
    assert utils.distance(Point(0, 0), Point(3, 4)) == 5.0
    assert utils.distance(Point(-1, -1), Point(-1, -1)) == 0.0


def test_distance_propagates_nan():
    assert math.isnan(utils.distance(Point(float("nan"), 0), Point(0, 0)))


def test_per_load_measures():
    load = _load()

    assert utils.distance_to_pickup(load) == pytest.approx(5.0)
    assert utils.pickup_to_dropoff(load) == pytest.approx(5.0)
    assert utils.dropoff_to_depot(load) == pytest.approx(10.0)
    assert utils.depot_to_dropoff(load) == pytest.approx(10.0)
    assert utils.pickup_to_depot(load) == pytest.approx(15.0)
    assert utils.solo_round_trip(load) == pytest.approx(20.0)


def test_distance_from_depot():
    assert utils.distance_from_depot(Point(0, -7)) == pytest.approx(7.0)


@pytest.mark.parametrize("text", ["(1.5,-2)", "(1.5, -2)", " ( 1.5 , -2 ) "])
def test_parse_point(text):
    assert utils.parse_point(text) == Point(1.5, -2.0)


@pytest.mark.parametrize("text", ["(1,2", "1,2", "(abc, 1)", "(1, 2, 3)", "(nan, 1)", "(1, inf)"])
def test_parse_point_rejects_malformed(text):
    with pytest.raises(ValueError):
        utils.parse_point(text)


def test_parse_load_line():
    load = utils.parse_load_line("7 (-9.1,-48.8) (-116.7,-14.4)\n")

    assert load.load_id == "7"
    assert load.pickup == Point(-9.1, -48.8)
    assert load.dropoff == Point(-116.7, -14.4)


def test_parse_load_line_allows_spaces_inside_points():
    load = utils.parse_load_line("12 (1, 2) (3, 4)")
    assert (load.pickup, load.dropoff) == (Point(1, 2), Point(3, 4))


@pytest.mark.parametrize("line", ["7 (1,2)", "7 (1,2) (3,4) extra", "(1,2) (3,4)", "7 (1,x) (3,4)"])
def test_parse_load_line_rejects_malformed(line):
    with pytest.raises(ValueError):
        utils.parse_load_line(line)


def test_format_schedule():
    assert utils.format_schedule(["4", "10", "2"]) == "[4,10,2]"
    assert utils.format_schedule([]) == "[]"


def test_schedule_str_matches_format_schedule():
    a = Load("A", Point(1, 0), Point(2, 0))
    b = Load("B", Point(5, 0), Point(6, 0))
    schedule = Schedule(loads=(a, b), total_distance=12.0)

    assert str(schedule) == "[A,B]"
    assert str(schedule) == utils.format_schedule(schedule.load_ids)
    assert str(Schedule(loads=())) == "[]"


def test_format_time_duration():
    assert utils.format_time_duration(45) == "45m"
    assert utils.format_time_duration(723) == "12h 3m"
