"""Window, drawing and the main loop."""

from __future__ import annotations

import argparse
from functools import lru_cache

import pygame

from .app import SolverApp, State
from .layout import (
    BLOCK_UNITS,
    BOARD_WIDTH,
    CELL_HEIGHT,
    CELL_WIDTH,
    RESET_BUTTON,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    START_BUTTON,
    SUDOKU_UNITS,
    TOP_LAYER_HEIGHT,
    TOP_LAYER_WIDTH,
    Rect,
)

TITLE = "SUDOKU SOLVER"

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GREY = (192, 192, 192)
RED = (255, 0, 0)

_NUMBER_KEYS = {
    **{getattr(pygame, f"K_{n}"): n for n in range(10)},
    **{getattr(pygame, f"K_KP{n}"): n for n in range(10)},
}


def key_to_number(key: int) -> int | None:
    """The digit a key (top row or keypad) stands for, or None."""
    return _NUMBER_KEYS.get(key)


def _held_number(pressed) -> int | None:
    held = [number for key, number in _NUMBER_KEYS.items() if pressed[key]]
    return min(held) if held else None


@lru_cache(maxsize=None)
def _font(scale: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, 12 * scale)


def _text(surface, text: str, pos: tuple[int, int], colour, scale: int = 1, centre: bool = False) -> None:
    image = _font(scale).render(text, False, colour)
    rect = image.get_rect(center=pos) if centre else image.get_rect(topleft=pos)
    surface.blit(image, rect)


def _draw_boundaries(surface) -> None:
    pygame.draw.line(surface, BLACK, (0, TOP_LAYER_HEIGHT), (SCREEN_WIDTH, TOP_LAYER_HEIGHT))
    for index in range(SUDOKU_UNITS):
        colour = BLACK if index % BLOCK_UNITS == 0 else GREY
        y = TOP_LAYER_HEIGHT + index * CELL_HEIGHT
        pygame.draw.line(surface, colour, (0, y), (BOARD_WIDTH, y))
        x = BOARD_WIDTH - index * CELL_WIDTH
        pygame.draw.line(surface, colour, (x, TOP_LAYER_HEIGHT), (x, SCREEN_HEIGHT))


def _rect(button: Rect) -> pygame.Rect:
    return pygame.Rect(button.x, button.y, button.width, button.height)


def _draw_strings(app: SolverApp, surface) -> None:
    _text(surface, "Sudoku Solver", (TOP_LAYER_WIDTH // 2, TOP_LAYER_HEIGHT // 2), BLACK, 2, centre=True)
    x = BOARD_WIDTH + CELL_WIDTH
    _text(surface, app.start_label(), (x, int(TOP_LAYER_HEIGHT + CELL_HEIGHT * 1.25)), BLACK, 2)
    pygame.draw.rect(surface, BLACK, _rect(START_BUTTON), 1)
    _text(surface, app.reset_label(), (x, int(TOP_LAYER_HEIGHT + CELL_HEIGHT * 2.25)), BLACK, 2)
    pygame.draw.rect(surface, BLACK, _rect(RESET_BUTTON), 1)
    _text(surface, f"X: {app.mouse_x}", (x - 10, SCREEN_HEIGHT - CELL_HEIGHT), BLACK)
    _text(surface, f"Y: {app.mouse_y}", (x - 10, SCREEN_HEIGHT - CELL_HEIGHT // 2), BLACK)


def _draw_board(app: SolverApp, surface) -> None:
    if app.state is State.WAITING_FOR_INPUT:
        col, row = app.active_cell
        surface.fill(
            GREY,
            pygame.Rect(col * CELL_WIDTH, row * CELL_HEIGHT + TOP_LAYER_HEIGHT, CELL_WIDTH, CELL_HEIGHT),
        )
    for col, row, cell in app.board.cells():
        if cell.value:
            pos = (col * CELL_WIDTH + 12, row * CELL_HEIGHT + TOP_LAYER_HEIGHT + 12)
            _text(surface, str(cell.value), pos, RED if cell.fixed else BLACK, 3)


def _draw_help(app: SolverApp, surface) -> None:
    x, y = 440, 200
    _text(surface, app.help_text(), (x, y), BLACK)
    if app.state in (State.RUNNING, State.PAUSE, State.FINISHED):
        _text(surface, f"Iterations: {app.iterations}", (x, y + 100), BLACK)


def render(app: SolverApp, surface) -> None:
    """Draw the whole screen for the application's current state."""
    surface.fill(WHITE)
    _draw_boundaries(surface)
    _draw_strings(app, surface)
    _draw_board(app, surface)
    _draw_help(app, surface)


def main(argv: list[str] | None = None) -> int:
    """Open the window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="sudokustep", description="Watch a sudoku being solved step by step.")
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(TITLE)
        app = SolverApp()
        while True:
            pressed = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.MOUSEBUTTONDOWN and event.button in (1, 2, 3):
                    pressed = True
            x, y = pygame.mouse.get_pos()
            app.handle_input(x, y, pressed, _held_number(pygame.key.get_pressed()))
            app.update()
            render(app, screen)
            pygame.display.flip()
    finally:
        _font.cache_clear()
        pygame.quit()