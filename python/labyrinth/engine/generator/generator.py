"""Generates solvable labyrinth puzzles from a seed."""

from __future__ import annotations

import logging
from datetime import date

from labyrinth.config import DEFAULT_CONFIG, EngineConfig
from labyrinth.engine.generator.daily import daily_seed, day_index
from labyrinth.engine.generator.decoys import decoy_density, fill_decoys, lay_segments
from labyrinth.engine.generator.difficulty import difficulty_for_day, template_for_seed
from labyrinth.engine.generator.gems import gem_target, place_branch_gems, place_route_gems
from labyrinth.engine.generator.rng import SeededRandom, create_rng
from labyrinth.engine.generator.route import build_route, pick_endpoints, route_edges
from labyrinth.engine.generator.scrambler import scramble
from labyrinth.engine.solver.estimator import (
    min_swaps_to_collect_all_gems,
    min_swaps_to_solve,
)
from labyrinth.models.board import GOAL_ID, START_ID, Board, Position, Tile
from labyrinth.models.puzzle import Difficulty, DifficultyProfile, Puzzle, PuzzleTemplate

logger = logging.getLogger(__name__)


class PuzzleGenerator:
    """Runs the whole pipeline: route, gems, decoys, scramble, estimate.

    Generation always succeeds; exhausted searches fall back to simpler but
    valid boards.
    """

    def __init__(self, config: EngineConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def generate(
        self,
        seed: str,
        difficulty: Difficulty = Difficulty.MEDIUM,
        template: PuzzleTemplate | None = None,
    ) -> Puzzle:
        """Return the puzzle for *seed*; identical seeds give identical puzzles."""
        template = template or template_for_seed(seed, difficulty)
        rng = create_rng(seed)

        start, goal = pick_endpoints(template.rows, template.cols, rng, self.config)
        route = build_route(template.rows, template.cols, start, goal, rng, self.config)
        grid = self._lay_route(template, route)

        gems = self._place_gems(grid, route, template, rng)
        fill_decoys(grid, route, decoy_density(template.decoy_density, rng, self.config),
                    rng, self.config)
        lay_segments(grid, route, rng, self.config)

        solution = Board.from_rows(grid)
        result = scramble(solution, start, goal, template.difficulty, rng, self.config)
        profile = self.profile(result.board, start, goal, gems)

        logger.info(
            "Generated %s %dx%d puzzle for %r: route=%d gems=%d swaps=%d optimal=%d/%d",
            template.difficulty.value, template.rows, template.cols, seed,
            len(route), len(gems), len(result.swaps),
            profile.optimal_to_goal, profile.optimal_all_gems,
        )
        return Puzzle(
            seed=seed,
            template=template,
            start=start,
            goal=goal,
            board=result.board,
            solution=solution,
            route=tuple(route),
            gems=tuple(gems),
            profile=profile,
        )

    def generate_daily(self, day: date) -> Puzzle:
        return self.generate(daily_seed(day), difficulty_for_day(day_index(day)))

    def profile(
        self, board: Board, start: Position, goal: Position, gems: list[Position]
    ) -> DifficultyProfile:
        to_goal = min_swaps_to_solve(board, start, goal, self.config)
        all_gems = (
            min_swaps_to_collect_all_gems(board, start, goal, gems, self.config)
            if gems
            else to_goal
        )
        return DifficultyProfile(
            optimal_to_goal=to_goal,
            optimal_all_gems=all_gems,
            total_gems=len(gems),
        )

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _lay_route(template: PuzzleTemplate, route: list[Position]) -> list[list[Tile]]:
        grid = Board.blank(template.rows, template.cols).to_grid()
        edges = route_edges(route)
        last = len(route) - 1
        for i, pos in enumerate(route):
            tile_id = START_ID if i == 0 else GOAL_ID if i == last else f"route-{i}"
            grid[pos.y][pos.x] = Tile.path(tile_id, sorted(edges[pos]))
        return grid

    def _place_gems(
        self,
        grid: list[list[Tile]],
        route: list[Position],
        template: PuzzleTemplate,
        rng: SeededRandom,
    ) -> list[Position]:
        count = gem_target(template.gem_count, len(route))
        if self.config.gem_strategy == "route":
            return place_route_gems(grid, route, count)
        return place_branch_gems(grid, route, count, rng)


__all__ = ["PuzzleGenerator"]
