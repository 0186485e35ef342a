from labyrinth.engine.solver.connectivity import (
    Connection,
    can_step,
    check_connection,
    covers_gems,
    reachable,
)
from labyrinth.engine.solver.estimator import (
    min_swaps_to_collect_all_gems,
    min_swaps_to_solve,
)

__all__ = [
    "Connection",
    "can_step",
    "check_connection",
    "covers_gems",
    "reachable",
    "min_swaps_to_solve",
    "min_swaps_to_collect_all_gems",
]
