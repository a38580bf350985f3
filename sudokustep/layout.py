"""Screen geometry: board area, info box and the clickable buttons."""

from __future__ import annotations

from dataclasses import dataclass

SCREEN_WIDTH = 600
SCREEN_HEIGHT = 445

TOP_LAYER_HEIGHT = 40
TOP_LAYER_WIDTH = SCREEN_WIDTH

BOARD_WIDTH = 405
BOARD_HEIGHT = SCREEN_HEIGHT - TOP_LAYER_HEIGHT

INFO_BOX_WIDTH = SCREEN_WIDTH - BOARD_WIDTH
INFO_BOX_HEIGHT = BOARD_HEIGHT

SUDOKU_UNITS = 9
BLOCK_UNITS = 3

CELL_WIDTH = BOARD_WIDTH // SUDOKU_UNITS
CELL_HEIGHT = BOARD_HEIGHT // SUDOKU_UNITS

if BOARD_WIDTH != BOARD_HEIGHT or BOARD_WIDTH % SUDOKU_UNITS:
    raise RuntimeError("board must be square and divisible into cells")


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle on screen."""

    x: int
    y: int
    width: int
    height: int

    def contains(self, x: int, y: int) -> bool:
        """Whether the point lies strictly inside the rectangle."""
        return self.x < x < self.x + self.width and self.y < y < self.y + self.height


START_BUTTON = Rect(440, 85, 95, 35)
RESET_BUTTON = Rect(440, 130, 95, 35)


def cell_at(x: int, y: int) -> tuple[int, int] | None:
    """Return the (column, row) of the board cell under a screen point, if any."""
    if not (0 <= x < BOARD_WIDTH and TOP_LAYER_HEIGHT < y < SCREEN_HEIGHT):
        return None
    return x // CELL_WIDTH, (y - TOP_LAYER_HEIGHT) // CELL_HEIGHT