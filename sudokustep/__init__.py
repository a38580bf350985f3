"""Interactive Sudoku board with a visible, step-by-step backtracking solver."""

__version__ = "0.1.0"