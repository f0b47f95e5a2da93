# load-scheduler/load_scheduler/models.py
"""
Core domain models for the load scheduler.

This module defines the fundamental data structures used by the engine:
- Point: An immutable (x, y) coordinate pair
- Load: A transport job from a pickup point to a dropoff point
- Driver: Transient state of one driver while a schedule is being built
- Schedule: The finished, ordered visit sequence of one driver
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple


class Strategy(Enum):
    """Scheduling strategies understood by the dispatch engine."""
    DETOUR = "detour"    # Bidirectional detour minimization (primary)
    NEAREST = "nearest"  # Index-driven nearest pickup with reassignment


class ScheduleEnd(Enum):
    """Which end of a partial schedule a candidate load is inserted at."""
    HEAD = "HEAD"  # Visited before the current first load
    TAIL = "TAIL"  # Visited after the current last load


@dataclass(frozen=True)
class Point:
    """A position on the plane. The depot sits at the origin."""
    x: float
    y: float

    def __str__(self) -> str:
        return f"({self.x:f}, {self.y:f})"


@dataclass(frozen=True)
class Load:
    """
    A transport job to be carried from pickup to dropoff.

    Attributes:
        load_id: Unique identifier from the problem file
        pickup: Where the load is collected
        dropoff: Where the load is delivered
    """
    load_id: str
    pickup: Point
    dropoff: Point

    def __repr__(self) -> str:
        return f"Load({self.load_id})"


@dataclass
class Driver:
    """
    Represents a driver while their schedule is under construction.

    Attributes:
        position: Where the driver currently is (starts at the depot)
        distance: Distance driven so far, excluding the trip home. Reported
            in debug logs only; budget checks recompute the full schedule.
        loads: Loads completed so far, in visit order
    """
    position: Point
    distance: float = 0.0
    loads: List[Load] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True until the driver has taken a first load."""
        return not self.loads

    def __repr__(self) -> str:
        return f"Driver(loads={len(self.loads)}, dist={self.distance:.2f})"


@dataclass(frozen=True)
class Schedule:
    """
    The finalized visit order of one driver.

    Attributes:
        loads: Loads in the order they are visited
        total_distance: Round-trip distance, depot legs included
    """
    loads: Tuple[Load, ...]
    total_distance: float = 0.0

    @property
    def num_loads(self) -> int:
        """Returns the number of loads in this schedule."""
        return len(self.loads)

    @property
    def load_ids(self) -> List[str]:
        """Returns load IDs in visit order."""
        return [load.load_id for load in self.loads]

    def __str__(self) -> str:
        return "[" + ",".join(self.load_ids) + "]"

    def __repr__(self) -> str:
        return f"Schedule(loads={self.load_ids}, dist={self.total_distance:.2f})"
