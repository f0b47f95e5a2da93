# load-scheduler/load_scheduler/costs.py
"""
Route cost model for the schedule builder.

This module answers the three questions the strategies ask about a
candidate load:
- How long is a schedule, depot legs included?
- Would adding the candidate push the schedule past the drive-time budget?
- How much extra driving does the candidate cost at a given end?

Key Design Principles:
1. Lower detour cost = better candidate
2. Budget checks re-evaluate the whole hypothetical schedule, never a delta
"""

from __future__ import annotations

from typing import Optional, Sequence

from . import config, utils
from .models import Driver, Load, ScheduleEnd


def total_distance(loads: Sequence[Load]) -> float:
    """
    Distance of a full schedule: depot to the first pickup, each loaded leg,
    each empty leg between a dropoff and the next pickup, and the last
    dropoff back to the depot.

    Returns:
        Total distance, 0.0 for an empty schedule
    """
    if not loads:
        return 0.0

    current = config.DEPOT
    total = 0.0
    for load in loads:
        total += utils.distance(current, load.pickup)
        total += utils.pickup_to_dropoff(load)
        current = load.dropoff

    total += utils.distance(current, config.DEPOT)
    return total


def with_candidate(loads: Sequence[Load], candidate: Load, end: ScheduleEnd) -> list[Load]:
    """Return a new schedule with the candidate added at the given end."""
    if end is ScheduleEnd.HEAD:
        return [candidate, *loads]
    return [*loads, candidate]


def exceeds_budget(
    loads: Sequence[Load],
    candidate: Load,
    end: ScheduleEnd,
    max_drive_time: Optional[float] = None,
) -> bool:
    """
    Check whether inserting the candidate breaks the drive-time budget.

    Args:
        loads: Current partial schedule
        candidate: Load being considered
        end: Where the candidate would be inserted
        max_drive_time: Budget override (default from config)

    Returns:
        True if the hypothetical schedule's round trip exceeds the budget
    """
    if max_drive_time is None:
        max_drive_time = config.MAX_DRIVE_TIME
    return total_distance(with_candidate(loads, candidate, end)) > max_drive_time


def detour_cost(candidate: Load, end_load: Load, end: ScheduleEnd) -> float:
    """
    Marginal cost of visiting the candidate at one end of a schedule.

    At the head, the driver goes depot -> candidate -> current first pickup
    instead of depot -> current first pickup. At the tail, the driver goes
    current last dropoff -> candidate -> depot instead of straight home.

    Args:
        candidate: Load being considered
        end_load: The schedule's current first (HEAD) or last (TAIL) load
        end: Which end is being extended

    Returns:
        Extra distance; may be negative when the candidate lies on the way
    """
    if end is ScheduleEnd.HEAD:
        return (
            utils.depot_to_dropoff(candidate)
            + utils.distance(candidate.dropoff, end_load.pickup)
            - utils.distance_to_pickup(end_load)
        )
    return (
        utils.pickup_to_depot(candidate)
        + utils.distance(end_load.dropoff, candidate.pickup)
        - utils.dropoff_to_depot(end_load)
    )


def driver_exceeds_budget(
    driver: Driver,
    load: Load,
    max_drive_time: Optional[float] = None,
) -> bool:
    """
    Check whether the driver can still take the load and return in budget.

    The driver's schedule so far is re-evaluated with the load appended,
    so the answer matches the total the finished schedule will report.

    Returns:
        True if driving on to the load and then home is over budget
    """
    return exceeds_budget(driver.loads, load, ScheduleEnd.TAIL, max_drive_time)
