# load-scheduler/load_scheduler/config.py
"""
Configuration parameters for the load scheduler.

This module centralizes all tunable parameters, making it easy to:
- Adjust the per-driver drive-time budget
- Fine-tune the detour heuristic
- Switch between scheduling strategies

Engine entry points read these values at call time, so callers may pass
explicit overrides instead of mutating the module.
"""

from typing import Final, Tuple

from .models import Point

# =============================================================================
# DEPOT
# =============================================================================

DEPOT: Final[Point] = Point(0.0, 0.0)
"""Fixed origin. Every driver starts and ends the shift here."""

# =============================================================================
# DRIVE-TIME BUDGET
# =============================================================================

MAX_DRIVE_TIME: float = 12 * 60
"""
Maximum round-trip distance for one driver (12 hours, one unit per minute).
A schedule's total, including the leg back to the depot, never exceeds this,
except for a schedule holding a single load that is too long on its own.
"""

# =============================================================================
# DETOUR HEURISTIC
# =============================================================================

MIN_DETOUR_COST: float = 123.0
"""
Early-acceptance threshold for the detour strategy. Needs tuning.
A candidate whose detour cost falls below this is taken immediately instead
of finishing the scan. Lower = better schedules, slower runs.
"""

# =============================================================================
# STRATEGIES
# =============================================================================

DEFAULT_STRATEGY: str = "detour"
"""Strategy used when none is requested."""

AVAILABLE_STRATEGIES: Final[Tuple[str, ...]] = ("detour", "nearest")
"""
- detour: seeds with the farthest load and grows both ends by cheapest detour
- nearest: walks the pickup-distance index from the driver's position
"""

# =============================================================================
# INPUT / OUTPUT FORMAT
# =============================================================================

SKIP_HEADER_LINES: int = 1
"""Number of leading lines skipped in a problem file (column header)."""
