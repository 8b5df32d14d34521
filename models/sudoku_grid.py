import numpy as np

from models.board_position import BOARD_SIZE, all_positions
from utils.grid_display import format_grid

GRID_SIZE = BOARD_SIZE
BOX_SIZE = 3
EMPTY = 0
DIGITS = range(1, 10)


class DigitTracker:
    """Records which digits have been seen while scanning one row, column or box"""

    def __init__(self):
        self.found_digits = np.zeros(len(DIGITS), dtype=bool)
        self.okay = True

    def found_digit(self, digit):
        # Empty cells never clash
        if digit == EMPTY:
            return

        if self.found_digits[digit - 1]:
            self.okay = False
        else:
            self.found_digits[digit - 1] = True


class SudokuGrid:
    """9x9 Sudoku board, 0 marks an empty cell.

    Sudoku rules are not enforced on construction or on writes; call
    is_valid() to find out whether any placed digit clashes with another.
    """

    def __init__(self, rows):
        cells = np.array(rows)
        if cells.shape != (GRID_SIZE, GRID_SIZE):
            raise ValueError(f"Expected a {GRID_SIZE}x{GRID_SIZE} grid, got shape {cells.shape}")
        if not np.issubdtype(cells.dtype, np.integer):
            raise ValueError(f"Grid digits must be integers, got {cells.dtype}")
        if cells.min() < EMPTY or cells.max() > DIGITS[-1]:
            raise ValueError(f"Grid digits must be in range 0-9, got {cells.min()}..{cells.max()}")
        self.cells = cells

    def __eq__(self, other):
        if not isinstance(other, SudokuGrid):
            return NotImplemented
        return np.array_equal(self.cells, other.cells)

    def __repr__(self):
        return f"SudokuGrid({self.to_list()!r})"

    def __str__(self):
        return format_grid(self)

    def get(self, position):
        return int(self.cells[position.row, position.col])

    def set(self, position, digit):
        if not isinstance(digit, (int, np.integer)) or not (EMPTY <= digit <= DIGITS[-1]):
            raise ValueError(f"Digit {digit} is not in range 0-9")
        self.cells[position.row, position.col] = digit

    def clear(self, position):
        self.set(position, EMPTY)

    def is_valid(self):
        """Check that no row, column or box holds the same digit twice"""
        return self.check_rows() and self.check_columns() and self.check_boxes()

    def check_rows(self):
        return all(self.check_row(row_nbr) for row_nbr in range(GRID_SIZE))

    def check_columns(self):
        return all(self.check_column(col_nbr) for col_nbr in range(GRID_SIZE))

    def check_boxes(self):
        for box_row in range(BOX_SIZE):
            for box_col in range(BOX_SIZE):
                if not self.check_box(box_row, box_col):
                    return False
        return True

    def check_row(self, row_nbr):
        return self._check_unit(self.cells[row_nbr, :])

    def check_column(self, col_nbr):
        return self._check_unit(self.cells[:, col_nbr])

    def check_box(self, box_row, box_col):
        start_row = box_row * BOX_SIZE
        start_col = box_col * BOX_SIZE
        box = self.cells[start_row:start_row + BOX_SIZE, start_col:start_col + BOX_SIZE]
        return self._check_unit(box.ravel())

    def _check_unit(self, unit):
        tracker = DigitTracker()
        for digit in unit.tolist():
            tracker.found_digit(digit)
        return tracker.okay

    def is_complete(self):
        return all(self.get(position) != EMPTY for position in all_positions())

    def to_list(self):
        return self.cells.tolist()

    def copy(self):
        return SudokuGrid(self.cells.copy())

