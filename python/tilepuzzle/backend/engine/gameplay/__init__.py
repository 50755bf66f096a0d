from tilepuzzle.backend.engine.gameplay.engine import PuzzleEngine

__all__ = ["PuzzleEngine"]
