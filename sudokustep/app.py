"""Application state machine: user input, solver progress and status text."""

from __future__ import annotations

from enum import Enum, auto

from .board import Board, InvalidPlacement
from .layout import RESET_BUTTON, START_BUTTON, cell_at
from .solver import StepSolver


class State(Enum):
    IDLE = auto()
    WAITING_FOR_INPUT = auto()
    RUNNING = auto()
    PAUSE = auto()
    FINISHED = auto()


class SolverApp:
    """Holds the board and reacts to clicks and typed numbers."""

    def __init__(self) -> None:
        self.state = State.IDLE
        self.board = Board()
        self.reset()

    def reset(self) -> None:
        """Clear the board, the solver and the counters; the state is left alone."""
        self.board.reset()
        self.mouse_x = 0
        self.mouse_y = 0
        self.active_cell = (0, 0)
        self.input_valid = True
        self._solver: StepSolver | None = None
        self.iterations = 0

    def handle_input(self, x: int, y: int, pressed: bool, number: int | None) -> None:
        """Process one frame of input: mouse position, a click, and a held digit key."""
        self.mouse_x, self.mouse_y = x, y
        on_start = pressed and START_BUTTON.contains(x, y)
        on_reset = pressed and RESET_BUTTON.contains(x, y)

        if self.state is State.IDLE:
            cell = cell_at(x, y) if pressed else None
            if cell is not None:
                self.active_cell = cell
                self.state = State.WAITING_FOR_INPUT
            if on_start:
                self._solver = StepSolver(self.board)
                self.state = State.RUNNING
            if on_reset:
                self.reset()
                self.state = State.IDLE
        elif self.state is State.WAITING_FOR_INPUT:
            if number is not None:
                try:
                    self.board.place(*self.active_cell, number)
                except InvalidPlacement:
                    self.input_valid = False
                else:
                    self.input_valid = True
                    self.state = State.IDLE
        elif self.state is State.RUNNING:
            if on_start:
                self.state = State.PAUSE
            if on_reset:
                self.reset()
                self.state = State.IDLE
        elif self.state is State.PAUSE:
            if on_start:
                self.state = State.RUNNING
        elif self.state is State.FINISHED:
            if on_reset:
                self.reset()
                self.state = State.IDLE

    def update(self) -> None:
        """Advance the solver by one step while running."""
        if self.state is not State.RUNNING:
            return
        if self._solver is not None:
            self._solver.step()
        self.iterations += 1
        if self.board.is_solved():
            self.state = State.FINISHED

    def help_text(self) -> str:
        """Status line for the current state."""
        if self.state is State.WAITING_FOR_INPUT:
            return "Type a number..." if self.input_valid else "Invalid input!"
        return {
            State.IDLE: "Waiting for input...",
            State.RUNNING: "Running...",
            State.PAUSE: "Pausing...",
            State.FINISHED: "Finished!",
        }[self.state]

    def start_label(self) -> str:
        return "Pause" if self.state is State.RUNNING else "Start"

    def reset_label(self) -> str:
        return "Stop" if self.state is State.RUNNING else "Reset"