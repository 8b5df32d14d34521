import logging
import time

from models.board_position import BoardPosition
from models.sudoku_grid import DIGITS, SudokuGrid

log = logging.getLogger(__name__)


class SudokuSolver:
    """Fills the empty cells of a grid by depth-first backtracking.

    Cells are visited in row-major order and digits are tried in ascending
    order, so the first solution found is always the same one. The whole
    grid is revalidated after every trial placement.
    """

    def __init__(self, grid):
        self.grid = grid
        self.placements = 0
        self.backtracks = 0
        self.elapsed_time = 0.0

    def reset_counters(self):
        self.placements = 0
        self.backtracks = 0
        self.elapsed_time = 0.0

    def solve(self, position=None):
        """Solve the bound grid in place, starting at position (default: top left).

        Returns True when the grid now holds a complete valid solution. On
        False the grid is left exactly as it was before the call.
        """
        if position is None:
            position = BoardPosition(0, 0)

        self.reset_counters()
        log.debug("Solving from %r", position)
        start_time = time.perf_counter()
        solved = self._solve_helper(position)
        self.elapsed_time = time.perf_counter() - start_time

        log.info("%s after %d placements, %d backtracks in %.4fs",
                 "Solved" if solved else "No solution",
                 self.placements, self.backtracks, self.elapsed_time)
        return solved

    def _solve_helper(self, position):
        """Recursive helper for solving"""
        digit = self.grid.get(position)

        # Pre-filled cells are passed through untouched
        if digit != 0:
            if position.is_at_end():
                return self.grid.is_valid()
            return self._solve_helper(position.next_position())

        for digit_to_try in DIGITS:
            self.grid.set(position, digit_to_try)
            self.placements += 1

            if self.grid.is_valid():
                if position.is_at_end():
                    return True
                if self._solve_helper(position.next_position()):
                    return True

        self.grid.clear(position)  # Backtrack
        self.backtracks += 1
        return False


def solve_puzzle(rows):
    """Solve a copy of rows; return the solved grid, or None if there is no solution"""
    solution = SudokuGrid(rows)

    if SudokuSolver(solution).solve():
        return solution
    return None
