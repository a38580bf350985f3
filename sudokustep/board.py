"""The 9x9 sudoku grid and its placement rules."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .layout import BLOCK_UNITS, SUDOKU_UNITS


class InvalidPlacement(ValueError):
    """A number conflicts with its row, column or block."""


@dataclass
class Cell:
    """One square of the grid; fixed cells hold numbers the user entered."""

    value: int = 0
    fixed: bool = False


class Board:
    """A sudoku grid addressed as ``board[col, row]``."""

    def __init__(self) -> None:
        self._cells = [[Cell() for _ in range(SUDOKU_UNITS)] for _ in range(SUDOKU_UNITS)]

    @staticmethod
    def _check_position(col: int, row: int) -> None:
        if not (0 <= col < SUDOKU_UNITS and 0 <= row < SUDOKU_UNITS):
            raise IndexError(f"cell ({col}, {row}) is outside the board")

    @staticmethod
    def _check_number(number: int) -> None:
        if not 0 <= number <= SUDOKU_UNITS:
            raise ValueError(f"number {number} is not between 0 and {SUDOKU_UNITS}")

    def __getitem__(self, position: tuple[int, int]) -> Cell:
        col, row = position
        self._check_position(col, row)
        return self._cells[col][row]

    def reset(self) -> None:
        """Empty every cell."""
        for _, _, cell in self.cells():
            cell.value = 0
            cell.fixed = False

    def place(self, col: int, row: int, number: int) -> None:
        """Enter a given number; 0 clears the cell. Raises InvalidPlacement on conflict."""
        self._check_position(col, row)
        self._check_number(number)
        if number != 0 and not self.is_valid(col, row, number):
            raise InvalidPlacement(f"{number} conflicts at ({col}, {row})")
        cell = self._cells[col][row]
        cell.value = number
        cell.fixed = number != 0

    def is_valid(self, col: int, row: int, number: int) -> bool:
        """Whether no other cell in the row, column or block holds ``number``."""
        self._check_position(col, row)
        if any(self._cells[c][row].value == number for c in range(SUDOKU_UNITS) if c != col):
            return False
        if any(self._cells[col][r].value == number for r in range(SUDOKU_UNITS) if r != row):
            return False
        start_col = col // BLOCK_UNITS * BLOCK_UNITS
        start_row = row // BLOCK_UNITS * BLOCK_UNITS
        return not any(
            self._cells[c][r].value == number
            for c in range(start_col, start_col + BLOCK_UNITS)
            for r in range(start_row, start_row + BLOCK_UNITS)
            if (c, r) != (col, row)
        )

    def is_solved(self) -> bool:
        """Whether every cell is filled without conflicts."""
        return all(
            cell.value != 0 and self.is_valid(col, row, cell.value)
            for col, row, cell in self.cells()
        )

    def cells(self) -> Iterator[tuple[int, int, Cell]]:
        """Yield ``(col, row, cell)`` for every cell, column by column."""
        for col, column in enumerate(self._cells):
            for row, cell in enumerate(column):
                yield col, row, cell