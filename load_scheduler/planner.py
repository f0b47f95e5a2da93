# load-scheduler/load_scheduler/planner.py
"""
Planning front end for the load scheduler.

This module wraps the dispatch engine with everything a run needs around it:
- Reading loads from a problem file
- Running a strategy and collecting KPIs over the produced schedules
- Descriptive statistics over the load set

KEY METRIC: Drivers Used. Every driver is a full shift, so fewer schedules
for the same loads is the win; total distance breaks ties.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Set, Union

import pandas as pd

from . import config, utils
from .dispatch import DispatchEngine
from .models import Load, Schedule, Strategy

logger = logging.getLogger(__name__)

STAT_COLUMNS: List[str] = ["count", "mean", "min", "max"]

LOAD_MEASURES: Dict[str, Callable[[Load], float]] = {
    "pickup_to_dropoff": utils.pickup_to_dropoff,
    "depot_to_pickup": utils.distance_to_pickup,
    "dropoff_to_depot": utils.dropoff_to_depot,
    "round_trip": utils.solo_round_trip,
}


def load_statistics(loads: Iterable[Load]) -> pd.DataFrame:
    """
    Summarize the distances that drive scheduling difficulty.

    Args:
        loads: Loads to describe

    Returns:
        DataFrame indexed by measure with count/mean/min/max columns.
        Empty (no rows) when there are no loads.
    """
    loads = list(loads)
    if not loads:
        return pd.DataFrame(columns=STAT_COLUMNS)

    frame = pd.DataFrame(
        {name: [measure(load) for load in loads] for name, measure in LOAD_MEASURES.items()}
    )
    stats = frame.agg(STAT_COLUMNS).T
    stats.index.name = "measure"
    return stats


@dataclass
class PlanResults:
    """
    Container for one strategy run and its KPIs.
    """
    strategy: str
    schedules: List[Schedule]
    max_drive_time: float

    @property
    def total_loads(self) -> int:
        return sum(s.num_loads for s in self.schedules)

    @property
    def drivers_used(self) -> int:
        return len(self.schedules)

    @property
    def total_distance(self) -> float:
        return sum(s.total_distance for s in self.schedules)

    @property
    def max_schedule_distance(self) -> float:
        return max((s.total_distance for s in self.schedules), default=0.0)

    @property
    def loads_per_driver(self) -> float:
        return self.total_loads / self.drivers_used if self.drivers_used > 0 else 0.0

    @property
    def over_budget_schedules(self) -> int:
        """Schedules over budget because their single load is."""
        return sum(1 for s in self.schedules if s.total_distance > self.max_drive_time)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for display and reporting."""
        return {
            "strategy": self.strategy,
            "total_loads": self.total_loads,
            "drivers_used": self.drivers_used,
            "total_distance": round(self.total_distance, 2),
            "max_schedule_distance": round(self.max_schedule_distance, 2),
            "loads_per_driver": round(self.loads_per_driver, 2),
            "over_budget_schedules": self.over_budget_schedules,

            # Display format
            "Total Loads": self.total_loads,
            "Drivers Used": self.drivers_used,
            "Total Distance": f"{self.total_distance:.2f}",
            "Longest Schedule": utils.format_time_duration(self.max_schedule_distance),
            "Loads/Driver": f"{self.loads_per_driver:.2f}",
            "Over-Budget Schedules": self.over_budget_schedules,
        }


class Planner:
    """
    Runs scheduling strategies over one set of loads.

    Attributes:
        loads: The loads to schedule, in input order
        engine: Dispatch engine configured with the run's budgets
    """

    def __init__(
        self,
        loads: Iterable[Load],
        max_drive_time: Optional[float] = None,
        min_detour_cost: Optional[float] = None,
    ) -> None:
        """
        Args:
            loads: Loads to schedule
            max_drive_time: Budget override (default from config)
            min_detour_cost: Detour threshold override (default from config)
        """
        self.loads: List[Load] = list(loads)
        self.engine = DispatchEngine(max_drive_time=max_drive_time, min_detour_cost=min_detour_cost)

    @staticmethod
    def load_data(problem_file: str) -> List[Load]:
        """
        Load a problem from a text file.

        The first SKIP_HEADER_LINES lines are a header and blank lines are
        ignored. Every other line must read "<id> (<x>,<y>) (<x>,<y>)".

        Args:
            problem_file: Path to the problem file

        Returns:
            Loads in file order

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If any line is malformed or an id repeats
        """
        if not os.path.exists(problem_file):
            raise FileNotFoundError(f"Problem file not found: {problem_file}")

        loads: List[Load] = []
        seen_ids: Set[str] = set()
        with open(problem_file, 'r') as f:
            for line_number, line in enumerate(f, start=1):
                if line_number <= config.SKIP_HEADER_LINES or not line.strip():
                    continue
                try:
                    load = utils.parse_load_line(line)
                except ValueError as e:
                    raise ValueError(f"Invalid load data in {problem_file} line {line_number}: {e}") from e

                if load.load_id in seen_ids:
                    raise ValueError(
                        f"Invalid load data in {problem_file} line {line_number}: "
                        f"duplicate load id {load.load_id}"
                    )
                seen_ids.add(load.load_id)
                loads.append(load)

        logger.info(f"Loaded {len(loads)} loads from {problem_file}")
        return loads

    @classmethod
    def from_file(cls, problem_file: str, **engine_options: Any) -> Planner:
        """Build a planner straight from a problem file."""
        return cls(cls.load_data(problem_file), **engine_options)

    def run(self, strategy: Union[Strategy, str, None] = None) -> PlanResults:
        """
        Schedule all loads with one strategy.

        Args:
            strategy: Strategy to use (default from config)

        Returns:
            Schedules and KPIs for the run
        """
        if strategy is None:
            strategy = config.DEFAULT_STRATEGY

        schedules = self.engine.assign(self.loads, strategy)
        results = PlanResults(
            strategy=Strategy(strategy).value,
            schedules=schedules,
            max_drive_time=self.engine.max_drive_time,
        )
        logger.info(
            f"{results.strategy}: {results.drivers_used} drivers, "
            f"total distance {results.total_distance:.2f}"
        )
        return results

    def statistics(self) -> pd.DataFrame:
        """Descriptive statistics over this planner's loads."""
        return load_statistics(self.loads)
