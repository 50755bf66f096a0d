"""Pygame GUI frontend: the picture puzzle itself.

Slices the chosen picture into tiles, lets the player click or drag tiles
into the empty slot, and shows an overlay once the picture is restored.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path

import pygame

from tilepuzzle.backend.engine.gameplay import PuzzleEngine
from tilepuzzle.backend.models.arrangement import MIN_SIZE
from tilepuzzle.backend.models.config import MAX_SIZE, PuzzleConfig, next_image, resolve_image
from tilepuzzle.frontend.input_adapter import Direction, PointerAdapter, move_direction
from tilepuzzle.frontend.layout import tile_views

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_SURFACE0 = (49, 50, 68)
COL_SURFACE1 = (69, 71, 90)
COL_OVERLAY0 = (108, 112, 134)
COL_TEXT = (205, 214, 244)
COL_BLUE = (137, 180, 250)
COL_GREEN = (166, 227, 161)
COL_PINK = (245, 194, 231)
COL_YELLOW = (249, 226, 175)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
MARGIN = 20
TILE_GAP = 2
HEADER_H = 60
FOOTER_H = 120


# ---------------------------------------------------------------------------
# Simple clickable button
# ---------------------------------------------------------------------------
class _Btn:
    __slots__ = ("rect", "text", "font", "bg", "hover", "fg", "_hot")

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        font: pygame.font.Font,
        *,
        bg: tuple = COL_SURFACE0,
        hover: tuple = COL_SURFACE1,
        fg: tuple = COL_TEXT,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.bg = bg
        self.hover = hover
        self.fg = fg
        self._hot = False

    def draw(self, surf: pygame.Surface) -> None:
        c = self.hover if self._hot else self.bg
        pygame.draw.rect(surf, c, self.rect, border_radius=8)
        lbl = self.font.render(self.text, True, self.fg)
        surf.blit(
            lbl,
            (
                self.rect.centerx - lbl.get_width() // 2,
                self.rect.centery - lbl.get_height() // 2,
            ),
        )

    def motion(self, pos: tuple[int, int]) -> None:
        self._hot = self.rect.collidepoint(pos)

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(
        self,
        config: PuzzleConfig,
        images_dir: Path,
        rng: random.Random | None = None,
        moves: int | None = None,
    ) -> None:
        self._config = config
        self._images_dir = images_dir
        self._rng = rng
        self._moves = moves

        pygame.init()
        self._win_w = config.board_px + 2 * MARGIN
        self._win_h = HEADER_H + config.board_px + FOOTER_H
        self._surf = pygame.display.set_mode((self._win_w, self._win_h))
        pygame.display.set_caption("Tile Puzzle")
        self._clock = pygame.time.Clock()

        self._f_title = pygame.font.SysFont("Helvetica", 22, bold=True)
        self._f_big = pygame.font.SysFont("Helvetica", 34, bold=True)
        self._f_btn = pygame.font.SysFont("Helvetica", 14, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 13)

        self._load_picture()
        self._new_puzzle(config.size)

    # ── puzzle lifecycle ────────────────────────────────────────────────────

    def _new_puzzle(self, size: int) -> None:
        """Build a fresh scrambled puzzle; any progress is discarded."""
        self._config = self._config.with_size(size)
        self._engine = PuzzleEngine.scrambled(size, self._rng, self._moves)
        self._won = False
        self._tpx = (self._config.board_px - (size - 1) * TILE_GAP) // size
        self._f_tile = pygame.font.SysFont("Helvetica", max(14, self._tpx // 3), bold=True)
        board_w = size * self._tpx + (size - 1) * TILE_GAP
        self._origin = ((self._win_w - board_w) // 2, HEADER_H)
        self._pointer = PointerAdapter(
            self._engine, self._tpx, gap=TILE_GAP, origin=self._origin
        )
        self._prepare_picture()
        self._build_btns()

    def _load_picture(self) -> None:
        self._picture: pygame.Surface | None = None
        path = resolve_image(self._config.image, self._images_dir)
        if path is None:
            logger.warning("No picture found for %r, drawing numbered tiles", self._config.image)
            return
        logger.debug("Loading picture %s", path)
        self._picture = pygame.image.load(str(path)).convert()

    def _prepare_picture(self) -> None:
        """Scale the picture so one tile of it is exactly one tile on screen."""
        self._scaled: pygame.Surface | None = None
        if self._picture is not None:
            side = self._engine.size * self._tpx
            self._scaled = pygame.transform.smoothscale(self._picture, (side, side))

    def _build_btns(self) -> None:
        y = HEADER_H + self._config.board_px + 16
        bw, gap = 96, 8
        sx = (self._win_w - (4 * bw + 3 * gap)) // 2
        self._scramble_btn = _Btn(
            (sx, y, bw, 36), "SCRAMBLE", self._f_btn,
            bg=COL_PINK, hover=(245, 210, 227), fg=COL_BASE,
        )
        self._solution_btn = _Btn(
            (sx + bw + gap, y, bw, 36), "SOLUTION", self._f_btn,
            bg=COL_YELLOW, hover=(255, 240, 200), fg=COL_BASE,
        )
        self._size_btn = _Btn(
            (sx + 2 * (bw + gap), y, bw, 36),
            f"SIZE {self._engine.size}×{self._engine.size}",
            self._f_btn,
        )
        self._picture_btn = _Btn(
            (sx + 3 * (bw + gap), y, bw, 36), "PICTURE", self._f_btn,
            bg=COL_BLUE, hover=(170, 200, 250), fg=COL_BASE,
        )
        self._again_btn = _Btn(
            ((self._win_w - 200) // 2, HEADER_H + self._config.board_px // 2 + 20, 200, 46),
            "PLAY AGAIN",
            self._f_btn,
            bg=COL_GREEN, hover=(190, 240, 190), fg=COL_BASE,
        )
        self._btns = [
            self._scramble_btn, self._solution_btn, self._size_btn, self._picture_btn,
        ]

    def _next_size(self) -> int:
        size = self._engine.size + 1
        return MIN_SIZE if size > MAX_SIZE else size

    def _next_picture(self) -> None:
        """Switch to the next catalog picture and start over at the same size."""
        self._config = self._config.with_image(next_image(self._config.image))
        self._load_picture()
        self._new_puzzle(self._engine.size)

    def _after_move(self, moved: bool) -> None:
        if moved and self._engine.is_solved():
            logger.info("Solved %dx%d puzzle", self._engine.size, self._engine.size)
            self._won = True

    def _scramble(self) -> None:
        self._engine.scramble(self._moves)
        self._won = False

    def _show_solution(self) -> None:
        self._engine.reset()
        self._won = False

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw(self) -> None:
        self._surf.fill(COL_BASE)
        size = self._engine.size

        title = self._f_title.render(f"Tile Puzzle  {size}×{size}", True, COL_TEXT)
        self._surf.blit(title, ((self._win_w - title.get_width()) // 2, 18))

        ox, oy = self._origin
        board_w = size * self._tpx + (size - 1) * TILE_GAP
        pygame.draw.rect(
            self._surf, COL_MANTLE,
            pygame.Rect(ox - TILE_GAP, oy - TILE_GAP, board_w + 2 * TILE_GAP, board_w + 2 * TILE_GAP),
            border_radius=6,
        )

        for view in tile_views(self._engine, self._tpx, TILE_GAP):
            rect = pygame.Rect(ox + view.x, oy + view.y, self._tpx, self._tpx)
            if self._scaled is not None:
                crop = pygame.Rect(-view.crop_dx, -view.crop_dy, self._tpx, self._tpx)
                self._surf.blit(self._scaled, rect.topleft, crop)
            else:
                col = COL_GREEN if view.correct else COL_BLUE
                pygame.draw.rect(self._surf, col, rect, border_radius=6)
                lbl = self._f_tile.render(str(view.identity + 1), True, COL_BASE)
                self._surf.blit(
                    lbl,
                    (
                        rect.centerx - lbl.get_width() // 2,
                        rect.centery - lbl.get_height() // 2,
                    ),
                )

        for btn in self._btns:
            btn.draw(self._surf)

        hint = self._f_small.render(
            "Click or drag  Arrows/WASD move  R scramble  X solution  P picture",
            True,
            COL_OVERLAY0,
        )
        self._surf.blit(hint, ((self._win_w - hint.get_width()) // 2, self._win_h - 40))

        if self._won:
            self._draw_win_overlay()

    def _draw_win_overlay(self) -> None:
        shade = pygame.Surface((self._win_w, self._win_h), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 160))
        self._surf.blit(shade, (0, 0))
        msg = self._f_big.render("★  S O L V E D  ★", True, COL_GREEN)
        y = HEADER_H + self._config.board_px // 2 - 40
        self._surf.blit(msg, ((self._win_w - msg.get_width()) // 2, y))
        self._again_btn.draw(self._surf)

    # ── event handling ──────────────────────────────────────────────────────

    _KEYS: dict[int, Direction] = {
        pygame.K_UP: Direction.UP,
        pygame.K_w: Direction.UP,
        pygame.K_DOWN: Direction.DOWN,
        pygame.K_s: Direction.DOWN,
        pygame.K_LEFT: Direction.LEFT,
        pygame.K_a: Direction.LEFT,
        pygame.K_RIGHT: Direction.RIGHT,
        pygame.K_d: Direction.RIGHT,
    }

    def _ev_won(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            self._again_btn.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._again_btn.hit(ev.pos):
                self._scramble()
        elif ev.type == pygame.KEYDOWN:
            if ev.key in (pygame.K_r, pygame.K_RETURN):
                self._scramble()
            elif ev.key == pygame.K_ESCAPE:
                return False
        return True

    def _ev_game(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            for btn in self._btns:
                btn.motion(ev.pos)
            if self._pointer.active:
                self._after_move(self._pointer.motion(*ev.pos))
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._scramble_btn.hit(ev.pos):
                self._scramble()
            elif self._solution_btn.hit(ev.pos):
                self._show_solution()
            elif self._size_btn.hit(ev.pos):
                self._new_puzzle(self._next_size())
            elif self._picture_btn.hit(ev.pos):
                self._next_picture()
            else:
                self._pointer.press(*ev.pos)
        elif ev.type == pygame.MOUSEBUTTONUP and ev.button == 1:
            self._after_move(self._pointer.release(*ev.pos))
        elif ev.type == pygame.KEYDOWN:
            if ev.key in self._KEYS:
                self._after_move(move_direction(self._engine, self._KEYS[ev.key]))
            elif ev.key == pygame.K_r:
                self._scramble()
            elif ev.key == pygame.K_x:
                self._show_solution()
            elif ev.key == pygame.K_p:
                self._next_picture()
            elif ev.key == pygame.K_ESCAPE:
                return False
        return True

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    running = False
                    break
                handler = self._ev_won if self._won else self._ev_game
                if not handler(ev):
                    running = False
                    break

            self._draw()
            pygame.display.flip()
            self._clock.tick(30)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(
    config: PuzzleConfig,
    images_dir: Path,
    rng: random.Random | None = None,
    moves: int | None = None,
) -> None:
    """Launch the Pygame GUI."""
    app = PygameApp(config, images_dir, rng, moves)
    app.run_loop()
