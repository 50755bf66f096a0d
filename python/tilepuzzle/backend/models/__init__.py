from tilepuzzle.backend.models.arrangement import EMPTY, MIN_SIZE, Arrangement
from tilepuzzle.backend.models.config import MAX_SIZE, PuzzleConfig, resolve_image

__all__ = [
    "EMPTY",
    "MAX_SIZE",
    "MIN_SIZE",
    "Arrangement",
    "PuzzleConfig",
    "resolve_image",
]
