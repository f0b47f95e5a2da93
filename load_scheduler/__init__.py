# load-scheduler/load_scheduler/__init__.py

from .models import Point, Load, Driver, Schedule, ScheduleEnd, Strategy
from .config import (
    DEPOT,
    MAX_DRIVE_TIME,
    MIN_DETOUR_COST,
    DEFAULT_STRATEGY,
    AVAILABLE_STRATEGIES,
)
from .dispatch import DispatchEngine, assign_drivers
from .planner import Planner, PlanResults, load_statistics
from .costs import total_distance, detour_cost, exceeds_budget

__version__ = "1.0.0"

__all__ = [
    # Models
    "Point",
    "Load",
    "Driver",
    "Schedule",
    "ScheduleEnd",
    "Strategy",
    # Core
    "DispatchEngine",
    "Planner",
    "PlanResults",
    # Functions
    "assign_drivers",
    "load_statistics",
    "total_distance",
    "detour_cost",
    "exceeds_budget",
    # Config
    "DEPOT",
    "MAX_DRIVE_TIME",
    "MIN_DETOUR_COST",
    "DEFAULT_STRATEGY",
    "AVAILABLE_STRATEGIES",
]
