from labyrinth.engine.generator.generator import PuzzleGenerator
from labyrinth.engine.generator.rng import SeededRandom, create_rng

__all__ = ["PuzzleGenerator", "SeededRandom", "create_rng"]
