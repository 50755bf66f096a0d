"""Sliding tile puzzle: an image cut into N²−1 tiles and one empty slot."""

from tilepuzzle.backend.engine import PuzzleEngine
from tilepuzzle.backend.models import EMPTY, Arrangement, PuzzleConfig

__all__ = ["EMPTY", "Arrangement", "PuzzleConfig", "PuzzleEngine"]
__version__ = "0.1.0"
