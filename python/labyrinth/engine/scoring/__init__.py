from labyrinth.engine.scoring.scoring import StarRating, next_star_hint, rate

__all__ = ["StarRating", "rate", "next_star_hint"]
