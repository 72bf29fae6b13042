"""scan-sim — an educational simulator for SCAN disk scheduling.

Re-exports the solver so callers can write::

    from scan_sim import Direction, solve
"""

from scan_sim.disk import (
    DEFAULT_DIRECTION,
    DEFAULT_DISK_BOUND,
    DIRECTION_ALIASES,
    Direction,
    SeekStep,
    SolveResult,
    StepObserver,
    solve,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_DIRECTION",
    "DEFAULT_DISK_BOUND",
    "DIRECTION_ALIASES",
    "Direction",
    "SeekStep",
    "SolveResult",
    "StepObserver",
    "__version__",
    "solve",
]
