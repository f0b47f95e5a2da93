# load-scheduler/load_scheduler/utils.py
"""
Utility functions for the load scheduler.

Provides plane geometry over points and loads, plus the small parsing and
formatting helpers shared by the planner and the CLI.
"""

from __future__ import annotations

import math
import re
from typing import Iterable

from . import config
from .models import Load, Point

_POINT_PATTERN = re.compile(r"^\(\s*([^,()\s]+)\s*,\s*([^,()\s]+)\s*\)$")
_LINE_PATTERN = re.compile(r"^(\S+)\s+(\([^()]*\))\s*(\([^()]*\))$")


def distance(a: Point, b: Point) -> float:
    """
    Euclidean distance between two points.

    Non-finite coordinates propagate into the result and are not
    specially handled.

    Example:
        >>> distance(Point(0, 0), Point(3, 4))
        5.0
    """
    return math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2)


# =============================================================================
# PER-LOAD MEASURES
# =============================================================================

def distance_to_pickup(load: Load) -> float:
    """Depot to pickup. This is the sort key of the load index."""
    return distance(config.DEPOT, load.pickup)


def pickup_to_dropoff(load: Load) -> float:
    """Length of the loaded leg."""
    return distance(load.pickup, load.dropoff)


def dropoff_to_depot(load: Load) -> float:
    """Dropoff back to the depot."""
    return distance(load.dropoff, config.DEPOT)


def depot_to_dropoff(load: Load) -> float:
    """Depot to pickup, then on to the dropoff."""
    return distance_to_pickup(load) + pickup_to_dropoff(load)


def pickup_to_depot(load: Load) -> float:
    """Pickup to dropoff, then back to the depot."""
    return pickup_to_dropoff(load) + dropoff_to_depot(load)


def solo_round_trip(load: Load) -> float:
    """Distance of a schedule made of this load alone."""
    return distance_to_pickup(load) + pickup_to_dropoff(load) + dropoff_to_depot(load)


def distance_from_depot(point: Point) -> float:
    """Key of an arbitrary point in the load index's ordering."""
    return distance(config.DEPOT, point)


# =============================================================================
# PARSING AND FORMATTING
# =============================================================================

def parse_point(text: str) -> Point:
    """
    Parse a point written as "(x,y)" or "(x, y)".

    Raises:
        ValueError: If the text is not a pair of finite numbers
    """
    match = _POINT_PATTERN.match(text.strip())
    if match is None:
        raise ValueError(f"Malformed point: {text!r}")

    x, y = float(match.group(1)), float(match.group(2))
    if not (math.isfinite(x) and math.isfinite(y)):
        raise ValueError(f"Non-finite coordinate in point: {text!r}")
    return Point(x, y)


def parse_load_line(line: str) -> Load:
    """
    Parse one problem-file line of the form "<id> (<x>,<y>) (<x>,<y>)".

    Raises:
        ValueError: On a wrong token count or an unparsable coordinate
    """
    match = _LINE_PATTERN.match(line.strip())
    if match is None:
        raise ValueError(f"Expected '<id> (<x>,<y>) (<x>,<y>)', got {line.strip()!r}")

    load_id, pickup_text, dropoff_text = match.groups()
    return Load(load_id, parse_point(pickup_text), parse_point(dropoff_text))


def format_schedule(load_ids: Iterable[str]) -> str:
    """
    Render a driver's load ids the way the output collaborator expects.
    Matches str(Schedule).

    Example:
        >>> format_schedule(["4", "10", "2"])
        '[4,10,2]'
    """
    return "[" + ",".join(load_ids) + "]"


def format_time_duration(minutes: float) -> str:
    """
    Format a duration in minutes as a human-readable string.

    Args:
        minutes: Duration in minutes

    Returns:
        Formatted string like "1h 23m" or "45m"
    """
    if minutes < 60:
        return f"{minutes:.0f}m"
    hours = int(minutes // 60)
    mins = int(minutes % 60)
    return f"{hours}h {mins}m"
