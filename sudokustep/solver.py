"""Backtracking solver that advances one placement per call."""

from __future__ import annotations

from dataclasses import dataclass

from .board import Board
from .layout import SUDOKU_UNITS


@dataclass
class Step:
    """A cell under trial and the last candidate tried there."""

    col: int
    row: int
    candidate: int = 0


class StepSolver:
    """Solves a board incrementally, filling the cells that are not fixed."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self._stack: list[Step] = []
        first = self._next_free(-1, 0)
        if first is not None:
            self._stack.append(Step(*first))

    def _next_free(self, col: int, row: int) -> tuple[int, int] | None:
        """The first non-fixed cell after (col, row), scanning along rows."""
        while True:
            col += 1
            if col >= SUDOKU_UNITS:
                col = 0
                row += 1
            if row >= SUDOKU_UNITS:
                return None
            if not self.board[col, row].fixed:
                return col, row

    def step(self) -> bool:
        """Try the next candidate at the current cell; False once there is nothing left."""
        while self._stack:
            top = self._stack[-1]
            cell = self.board[top.col, top.row]
            if cell.fixed:
                self._stack.pop()
                continue

            for number in range(top.candidate + 1, SUDOKU_UNITS + 1):
                if self.board.is_valid(top.col, top.row, number):
                    cell.value = number
                    top.candidate = number
                    following = self._next_free(top.col, top.row)
                    if following is not None:
                        self._stack.append(Step(*following))
                    break
            else:
                cell.value = 0
                self._stack.pop()
            return True
        return False

    def exhausted(self) -> bool:
        """Whether every possibility has been tried."""
        return not self._stack