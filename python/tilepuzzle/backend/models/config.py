"""Puzzle configuration: grid size, board geometry, and source image."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from tilepuzzle.backend.models.arrangement import MIN_SIZE

MAX_SIZE = 8
DEFAULT_SIZE = 4
DEFAULT_BOARD_PX = 400

# Catalog of bundled pictures, looked up as ``<images_dir>/<name>.png``.
IMAGE_NAMES: tuple[str, ...] = ("book", "library", "nature")
DEFAULT_IMAGE = "book"


@dataclass
class PuzzleConfig:
    """Settings chosen by the player before a puzzle is built."""

    size: int = DEFAULT_SIZE
    board_px: int = DEFAULT_BOARD_PX
    image: str = DEFAULT_IMAGE

    def __post_init__(self) -> None:
        if not MIN_SIZE <= self.size <= MAX_SIZE:
            raise ValueError(
                f"Grid size must be between {MIN_SIZE} and {MAX_SIZE}, "
                f"got {self.size}."
            )
        if self.board_px < self.size:
            raise ValueError(
                f"Board of {self.board_px}px is too small for a "
                f"{self.size}×{self.size} grid."
            )

    @property
    def tile_px(self) -> int:
        return self.board_px // self.size

    def with_size(self, size: int) -> PuzzleConfig:
        """Return a copy of this config with a different grid size."""
        return PuzzleConfig(size=size, board_px=self.board_px, image=self.image)

    def with_image(self, image: str) -> PuzzleConfig:
        return PuzzleConfig(size=self.size, board_px=self.board_px, image=image)


def next_image(image: str) -> str:
    """Return the catalog picture after *image*, wrapping around.

    Names outside the catalog (including file paths) count as the default.
    """
    name = image if image in IMAGE_NAMES else DEFAULT_IMAGE
    return IMAGE_NAMES[(IMAGE_NAMES.index(name) + 1) % len(IMAGE_NAMES)]


def resolve_image(image: str, images_dir: Path) -> Path | None:
    """Return the picture file for *image*, or ``None`` if none is available.

    *image* is either a path to an existing file or a catalog name.  Unknown
    names fall back to the default picture.
    """
    candidate = Path(image).expanduser()
    if candidate.suffix and candidate.is_file():
        return candidate

    name = image if image in IMAGE_NAMES else DEFAULT_IMAGE
    path = images_dir / f"{name}.png"
    return path if path.is_file() else None
