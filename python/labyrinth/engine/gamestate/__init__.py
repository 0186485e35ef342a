from labyrinth.engine.gamestate.state import GameState, MoveHistory, Snapshot

__all__ = ["GameState", "MoveHistory", "Snapshot"]
