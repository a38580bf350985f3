# sudokustep

A small desktop Sudoku solver that shows its work. You enter the puzzle's
given digits on a 9×9 board and press **Start**. A backtracking solver then
fills the board, one step per frame, and shows its iteration count as it goes.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the window.

## Running

```
sudokustep
```

A window opens with the board on the left and the controls on the right. The
command takes no options apart from `--help`.

- **Click a cell** and then **type a digit** (top row or keypad) to fix that
  digit in the cell. Given digits are drawn in red. A digit that clashes with
  its row, column or 3×3 block is refused: *Invalid input!* is shown and the
  cell stays selected until a digit that fits is typed. Typing `0` clears the
  cell.
- **Start** begins solving. While the solver runs the button reads **Pause**.
  Click it to pause, and click it again to carry on.
- **Reset** clears the board when the app is idle or finished. While the
  solver runs the button reads **Stop**: it halts the run and clears the
  board. The button does nothing while the solver is paused.
- When every cell holds a digit that fits, the status reads *Finished!*.

The current mouse position is shown in the lower right corner.

## Using it from Python

The board and the solver work without a window:

```python
from sudokustep.board import Board
from sudokustep.solver import StepSolver

board = Board()
board.place(0, 0, 5)          # column, row, digit: fixes a given
solver = StepSolver(board)
while not board.is_solved() and solver.step():
    pass
print(board[0, 1].value)
```

- `Board.place(col, row, number)` raises `InvalidPlacement` (a `ValueError`)
  when the digit clashes. It raises `IndexError` or `ValueError` when the
  position or the digit is out of range.
- `Board.is_valid`, `Board.is_solved` and `Board.cells()` let you inspect the
  grid. `Board.cells()` yields `(col, row, cell)`.
- `StepSolver.step()` does one unit of backtracking work. It returns `False`
  once there is nothing left to try, and `StepSolver.exhausted()` then
  reports `True`.

`SolverApp` in `sudokustep.app` holds the whole interactive state machine:
idle, waiting for a digit, running, paused and finished. A front end feeds it
each frame's mouse position, click and held digit through `handle_input`, then
calls `update`. It reads the labels back from `help_text`, `start_label` and
`reset_label`. `sudokustep.gui.render` draws an app onto a pygame surface.

## Limits

The app does not report a puzzle that has no solution. When the solver has
tried every possibility, the app stays in the running state and the iteration
count keeps rising until you press **Stop**. Puzzles cannot be loaded from or
saved to files. Givens are entered by hand, one cell at a time.

## Tests

```
pip install .[test]
pytest
```