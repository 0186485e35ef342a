"""Engine configuration: every search bound in one place."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Bounds and probabilities used by generation, estimation and play.

    Attributes:
        route_attempts: Randomised route searches before the L-shaped fallback
        route_expansions: Cells a single route search may push onto its stack
        route_min_fill: Lower bound of the route length, as a fraction of area
        route_max_fill: Upper bound of the route length, as a fraction of area
        route_accept_ratio: Accepted route length relative to its target
        endpoint_attempts: Start/goal draws before the fixed corner fallback
        edge_probability: Chance an endpoint is placed on the board border
        gem_strategy: ``"branch"`` (optional spurs) or ``"route"`` (on route)
        decoy_density_min: Lowest decoy fill probability
        decoy_density_max: Highest decoy fill probability
        decoy_trap_probability: Chance an edge facing the route is closed
        decoy_segments: Inclusive range of isolated decoy segments
        decoy_segment_length: Inclusive range of cells per decoy segment
        scramble_attempts: Fresh scrambles tried before giving up
        corrective_swaps: Extra swaps allowed to break an accidental solution
        estimator_max_states: Boards the swap-distance search may visit
        estimator_goal_depth: Swap depth for the goal-only search
        estimator_gem_depth: Swap depth for the all-gems search
        estimator_fallback: Returned when a search is exhausted
        history_capacity: Undo snapshots kept per session
    """

    route_attempts: int = 30
    route_expansions: int = 4000
    route_min_fill: float = 0.4
    route_max_fill: float = 0.7
    route_accept_ratio: float = 0.7
    endpoint_attempts: int = 200
    edge_probability: float = 0.3
    gem_strategy: str = "branch"
    decoy_density_min: float = 0.4
    decoy_density_max: float = 0.6
    decoy_trap_probability: float = 0.7
    decoy_segments: tuple[int, int] = (1, 3)
    decoy_segment_length: tuple[int, int] = (2, 4)
    scramble_attempts: int = 50
    corrective_swaps: int = 5
    estimator_max_states: int = 1000
    estimator_goal_depth: int = 8
    estimator_gem_depth: int = 15
    estimator_fallback: int = 5
    history_capacity: int = 500


DEFAULT_CONFIG = EngineConfig()


__all__ = ["EngineConfig", "DEFAULT_CONFIG"]
