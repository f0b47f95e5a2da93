# load-scheduler/load_scheduler/dispatch.py
"""
Dispatch Engine for the load scheduler.

This module assigns every load to exactly one driver and orders each
driver's visits, keeping every schedule within the drive-time budget.
Two scheduling strategies are available:

1. **Detour** (primary): Loads are taken farthest-first. Each unvisited
   load seeds a new driver, whose schedule then grows at the head and at
   the tail by the candidate with the cheapest detour. Candidates below
   MIN_DETOUR_COST are accepted without finishing the scan.

2. **Nearest**: Loads go into an index keyed by pickup distance from the
   depot. One driver at a time repeatedly takes the load the index finds
   nearest to the driver's position. When that load no longer fits the
   budget, the driver goes home and a new driver starts from the load
   closest to the depot.

The first load of a schedule is never subject to the budget: a load whose
own round trip is too long still gets a driver, alone.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Set, Union

from . import config, costs, index, utils
from .models import Driver, Load, Schedule, ScheduleEnd, Strategy

logger = logging.getLogger(__name__)


def _check_unique_ids(loads: Sequence[Load]) -> None:
    """Raise ValueError if two loads share an id."""
    seen: Set[str] = set()
    for load in loads:
        if load.load_id in seen:
            raise ValueError(f"Duplicate load id: {load.load_id}")
        seen.add(load.load_id)


class DispatchEngine:
    """
    Turns an unordered list of loads into per-driver schedules.

    Attributes:
        max_drive_time: Round-trip budget per driver
        min_detour_cost: Early-acceptance threshold for the detour strategy
    """

    def __init__(
        self,
        max_drive_time: Optional[float] = None,
        min_detour_cost: Optional[float] = None,
    ) -> None:
        if max_drive_time is None:
            max_drive_time = config.MAX_DRIVE_TIME
        if min_detour_cost is None:
            min_detour_cost = config.MIN_DETOUR_COST

        if max_drive_time < 0:
            raise ValueError(f"max_drive_time must be non-negative, got {max_drive_time}")

        self.max_drive_time: float = max_drive_time
        self.min_detour_cost: float = min_detour_cost

    def assign(
        self,
        loads: Iterable[Load],
        strategy: Union[Strategy, str, None] = None,
    ) -> List[Schedule]:
        """
        Assign all loads to drivers with the requested strategy.

        Args:
            loads: Loads to schedule, in input order
            strategy: 'detour' or 'nearest' (default from config)

        Returns:
            One schedule per driver, in the order drivers were filled

        Raises:
            ValueError: On an unknown strategy or duplicate load ids
        """
        if strategy is None:
            strategy = config.DEFAULT_STRATEGY
        try:
            strategy = Strategy(strategy)
        except ValueError:
            raise ValueError(
                f"Unknown strategy '{strategy}'. "
                f"Available strategies: {', '.join(config.AVAILABLE_STRATEGIES)}"
            ) from None

        if strategy is Strategy.NEAREST:
            return self.run_nearest(loads)
        return self.run_detour(loads)

    def _finalize(self, loads: Sequence[Load]) -> Schedule:
        """Freeze a driver's loads into a schedule with its round-trip total."""
        schedule = Schedule(loads=tuple(loads), total_distance=costs.total_distance(loads))

        if schedule.total_distance > self.max_drive_time:
            # Only a lone seed load can get here
            logger.warning(
                f"Load {schedule.load_ids[0]} needs {schedule.total_distance:.2f} "
                f"on its own (budget {self.max_drive_time:.2f}); assigned alone"
            )
        logger.debug(f"Finalized {schedule!r}")
        return schedule

    # =========================================================================
    # DETOUR STRATEGY
    # =========================================================================

    def _grow(
        self,
        schedule: List[Load],
        candidates: Sequence[Load],
        visited: Set[str],
        end: ScheduleEnd,
    ) -> None:
        """
        Extend one end of a schedule in place until no candidate qualifies.

        Each pass scans the unvisited candidates in order, skipping any that
        would break the budget. A candidate is chosen when its detour beats
        the best detour seen so far at this end, or immediately when it is
        below the early-acceptance threshold. Growth stops on the first pass
        that chooses nothing.
        """
        best_cost = float('inf')

        while True:
            end_load = schedule[0] if end is ScheduleEnd.HEAD else schedule[-1]
            chosen: Optional[Load] = None

            for candidate in candidates:
                if candidate.load_id in visited:
                    continue
                if costs.exceeds_budget(schedule, candidate, end, self.max_drive_time):
                    continue

                cost = costs.detour_cost(candidate, end_load, end)
                if cost < best_cost:
                    best_cost = cost
                    chosen = candidate

                if cost < self.min_detour_cost:
                    chosen = candidate
                    break

            if chosen is None:
                return

            if end is ScheduleEnd.HEAD:
                schedule.insert(0, chosen)
            else:
                schedule.append(chosen)
            visited.add(chosen.load_id)

    def run_detour(self, loads: Iterable[Load]) -> List[Schedule]:
        """
        Bidirectional detour minimization.

        Loads are sorted by solo round trip, longest first, so the loads
        hardest to combine pick their companions first. Ties keep input
        order.

        Args:
            loads: Loads to schedule

        Returns:
            One schedule per driver
        """
        loads = list(loads)
        _check_unique_ids(loads)

        ordered = sorted(loads, key=utils.solo_round_trip, reverse=True)
        visited: Set[str] = set()
        schedules: List[Schedule] = []

        for seed in ordered:
            if seed.load_id in visited:
                continue

            schedule = [seed]
            visited.add(seed.load_id)
            logger.debug(f"Seeding driver {len(schedules) + 1} with {seed!r}")

            self._grow(schedule, ordered, visited, ScheduleEnd.HEAD)
            self._grow(schedule, ordered, visited, ScheduleEnd.TAIL)

            schedules.append(self._finalize(schedule))

        logger.info(f"Detour strategy: {len(loads)} loads -> {len(schedules)} drivers")
        return schedules

    # =========================================================================
    # NEAREST STRATEGY
    # =========================================================================

    def _complete(self, driver: Driver, load: Load) -> None:
        """Drive to the load's pickup, deliver it, and record it."""
        driver.distance += utils.distance(driver.position, load.pickup)
        driver.distance += utils.pickup_to_dropoff(load)
        driver.position = load.dropoff
        driver.loads.append(load)

    def _finish_driver(self, driver: Driver) -> Schedule:
        """Close out a driver's shift, sending them home from the last dropoff."""
        home = utils.distance(driver.position, config.DEPOT)
        logger.debug(
            f"Driver done at {driver.position}: {driver.distance:.2f} driven, "
            f"{home:.2f} back to depot"
        )
        return self._finalize(driver.loads)

    def run_nearest(self, loads: Iterable[Load]) -> List[Schedule]:
        """
        Index-driven nearest pickup with reassignment.

        Args:
            loads: Loads to schedule; insertion order shapes the index

        Returns:
            One schedule per driver
        """
        loads = list(loads)
        _check_unique_ids(loads)

        root = index.build_index(loads)
        logger.debug(f"Built load index: {len(loads)} loads, height {index.height(root)}")

        schedules: List[Schedule] = []
        driver = Driver(position=config.DEPOT)

        while root is not None:
            node = index.search(root, driver.position)

            if not driver.is_empty and costs.driver_exceeds_budget(driver, node.load, self.max_drive_time):
                schedules.append(self._finish_driver(driver))
                driver = Driver(position=config.DEPOT)
                node = index.minimum(root)

            self._complete(driver, node.load)
            root = index.delete(root, node)

        if not driver.is_empty:
            schedules.append(self._finish_driver(driver))

        logger.info(f"Nearest strategy: {len(loads)} loads -> {len(schedules)} drivers")
        return schedules


def assign_drivers(
    loads: Iterable[Load],
    strategy: Union[Strategy, str, None] = None,
    max_drive_time: Optional[float] = None,
    min_detour_cost: Optional[float] = None,
) -> List[Schedule]:
    """
    Convenience wrapper: build an engine and assign the loads in one call.

    Returns:
        One schedule per driver
    """
    engine = DispatchEngine(max_drive_time=max_drive_time, min_detour_cost=min_detour_cost)
    return engine.assign(loads, strategy)
