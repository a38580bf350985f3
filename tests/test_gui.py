import pygame
import pytest

from sudokustep.app import SolverApp
from sudokustep.gui import BLACK, GREY, RED, WHITE, key_to_number, render
from sudokustep.layout import (
    CELL_HEIGHT,
    CELL_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TOP_LAYER_HEIGHT,
)


def cell_centre(col, row):
    return col * CELL_WIDTH + CELL_WIDTH // 2, TOP_LAYER_HEIGHT + row * CELL_HEIGHT + CELL_HEIGHT // 2


def draw(app):
    surface = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    render(app, surface)
    return surface


def colour(surface, point):
    return tuple(surface.get_at(point))[:3]


@pytest.mark.parametrize("number", range(10))
def test_digit_keys(number):
    assert key_to_number(getattr(pygame, f"K_{number}")) == number
    assert key_to_number(getattr(pygame, f"K_KP{number}")) == number


def test_other_keys_are_not_numbers():
    assert key_to_number(pygame.K_a) is None
    assert key_to_number(pygame.K_SPACE) is None


def test_render_draws_top_separator():
    surface = draw(SolverApp())
    assert colour(surface, (5, TOP_LAYER_HEIGHT)) == BLACK
    assert colour(surface, (5, 5)) == WHITE


def test_render_highlights_active_cell_only_when_waiting():
    app = SolverApp()
    point = (5, TOP_LAYER_HEIGHT + 5)
    assert colour(draw(app), point) == WHITE
    app.handle_input(*cell_centre(0, 0), True, None)
    assert colour(draw(app), point) == GREY


def test_render_fixed_digit_in_red():
    app = SolverApp()
    app.board.place(2, 2, 8)
    surface = draw(app)
    x0, y0 = 2 * CELL_WIDTH, TOP_LAYER_HEIGHT + 2 * CELL_HEIGHT
    pixels = {
        colour(surface, (x, y))
        for x in range(x0 + 1, x0 + CELL_WIDTH)
        for y in range(y0 + 1, y0 + CELL_HEIGHT)
    }
    assert RED in pixels


def test_render_empty_cell_is_blank():
    surface = draw(SolverApp())
    x0, y0 = 4 * CELL_WIDTH, TOP_LAYER_HEIGHT + 4 * CELL_HEIGHT
    pixels = {
        colour(surface, (x, y))
        for x in range(x0 + 1, x0 + CELL_WIDTH)
        for y in range(y0 + 1, y0 + CELL_HEIGHT)
    }
    assert pixels == {WHITE}