import pytest

from sudokustep.layout import (
    BOARD_WIDTH,
    CELL_HEIGHT,
    CELL_WIDTH,
    RESET_BUTTON,
    SCREEN_HEIGHT,
    START_BUTTON,
    SUDOKU_UNITS,
    TOP_LAYER_HEIGHT,
    Rect,
    cell_at,
)


def test_cell_dimensions_tile_the_board():
    last = SUDOKU_UNITS - 1
    assert cell_at(BOARD_WIDTH - 1, SCREEN_HEIGHT - 1) == (last, last)
    assert cell_at(CELL_WIDTH, TOP_LAYER_HEIGHT + CELL_HEIGHT) == (1, 1)
    assert cell_at(CELL_WIDTH - 1, TOP_LAYER_HEIGHT + CELL_HEIGHT - 1) == (0, 0)


def test_rect_contains_is_strict():
    rect = Rect(10, 20, 30, 40)
    assert rect.contains(11, 21)
    assert not rect.contains(10, 21)
    assert not rect.contains(11, 20)
    assert not rect.contains(40, 30)
    assert not rect.contains(39, 60)
    assert rect.contains(39, 59)


def test_buttons_do_not_overlap():
    for y in range(START_BUTTON.y, START_BUTTON.y + START_BUTTON.height + 1):
        x = START_BUTTON.x + 1
        assert not (START_BUTTON.contains(x, y) and RESET_BUTTON.contains(x, y))


def test_button_centres_are_inside():
    for button in (START_BUTTON, RESET_BUTTON):
        assert button.contains(button.x + button.width // 2, button.y + button.height // 2)


@pytest.mark.parametrize("col", range(SUDOKU_UNITS))
@pytest.mark.parametrize("row", range(SUDOKU_UNITS))
def test_cell_at_round_trip(col, row):
    x = col * CELL_WIDTH + 1
    y = TOP_LAYER_HEIGHT + row * CELL_HEIGHT + 1
    assert cell_at(x, y) == (col, row)


def test_cell_at_origin():
    assert cell_at(0, TOP_LAYER_HEIGHT + 1) == (0, 0)


@pytest.mark.parametrize(
    "point",
    [(BOARD_WIDTH, 100), (10, TOP_LAYER_HEIGHT), (10, SCREEN_HEIGHT), (-1, 100), (10, 5)],
)
def test_cell_at_outside_board(point):
    assert cell_at(*point) is None