"""Star rating from completion, move count and gems."""

from __future__ import annotations

from dataclasses import dataclass

from labyrinth.config import DEFAULT_CONFIG, EngineConfig
from labyrinth.engine.solver.estimator import (
    min_swaps_to_collect_all_gems,
    min_swaps_to_solve,
)
from labyrinth.models.board import Board, Position
from labyrinth.models.puzzle import DifficultyProfile

MIN_OPTIMAL = 5


@dataclass(frozen=True)
class StarRequirements:
    completed: bool
    efficient: bool
    all_gems_collected: bool


@dataclass(frozen=True)
class StarThresholds:
    max_moves_for_2_stars: int
    max_moves_for_3_stars: int
    total_gems: int


@dataclass(frozen=True)
class StarRating:
    stars: int
    requirements: StarRequirements
    thresholds: StarThresholds


def _estimate_profile(
    board: Board, start: Position, goal: Position, config: EngineConfig
) -> DifficultyProfile:
    gems = board.gem_positions()
    to_goal = max(MIN_OPTIMAL, min_swaps_to_solve(board, start, goal, config))
    all_gems = (
        max(MIN_OPTIMAL, min_swaps_to_collect_all_gems(board, start, goal, gems, config))
        if gems
        else to_goal
    )
    return DifficultyProfile(to_goal, all_gems, len(gems))


def star_thresholds(profile: DifficultyProfile) -> StarThresholds:
    three = profile.optimal_all_gems if profile.total_gems > 0 else profile.optimal_to_goal
    return StarThresholds(
        max_moves_for_2_stars=profile.optimal_to_goal + 2,
        max_moves_for_3_stars=three,
        total_gems=profile.total_gems,
    )


def rate(
    completed: bool,
    moves: int,
    profile: DifficultyProfile | None,
    gems_collected: int = 0,
    *,
    board: Board | None = None,
    start: Position | None = None,
    goal: Position | None = None,
    config: EngineConfig = DEFAULT_CONFIG,
) -> StarRating:
    """Rate a finished (or abandoned) game.

    *profile* is the difficulty cached at generation time. Without it the
    values are estimated from *board*, floored at ``MIN_OPTIMAL``.

    A completed game earns three stars when it stays within the all-gems
    optimum with every gem collected, two when it finishes within two moves
    of the goal optimum, and one otherwise. The three-star ceiling may exceed
    the two-star one when gems are expensive to reach.
    """
    if profile is None:
        if board is None or start is None or goal is None:
            raise ValueError("rate() needs a profile or a board with start and goal")
        profile = _estimate_profile(board, start, goal, config)

    thresholds = star_thresholds(profile)
    all_gems = profile.total_gems == 0 or gems_collected >= profile.total_gems
    efficient = completed and moves <= thresholds.max_moves_for_2_stars

    if not completed:
        stars = 0
    elif moves <= thresholds.max_moves_for_3_stars and all_gems:
        stars = 3
    elif efficient:
        stars = 2
    else:
        stars = 1

    return StarRating(
        stars=stars,
        requirements=StarRequirements(
            completed=completed,
            efficient=efficient,
            all_gems_collected=completed and all_gems,
        ),
        thresholds=thresholds,
    )


def next_star_hint(rating: StarRating, moves: int, gems_collected: int = 0) -> str:
    """Short advice on what the next star needs."""
    t = rating.thresholds
    if rating.stars == 0:
        return "Connect the start to the goal to earn your first star."
    if rating.stars == 1:
        return f"Finish in {t.max_moves_for_2_stars} moves or fewer for a second star."
    if rating.stars == 2:
        needs = []
        if moves > t.max_moves_for_3_stars:
            needs.append(f"finish in {t.max_moves_for_3_stars} moves")
        if t.total_gems and gems_collected < t.total_gems:
            needs.append(f"collect all {t.total_gems} gems")
        return "For the third star, " + " and ".join(needs) + "."
    return "Perfect! Maximum reward achieved!"


__all__ = [
    "StarRating",
    "StarRequirements",
    "StarThresholds",
    "MIN_OPTIMAL",
    "rate",
    "star_thresholds",
    "next_star_hint",
]
