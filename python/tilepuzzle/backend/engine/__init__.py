from tilepuzzle.backend.engine.gamegenerator import Scrambler
from tilepuzzle.backend.engine.gameplay import PuzzleEngine

__all__ = ["PuzzleEngine", "Scrambler"]
