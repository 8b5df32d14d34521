import logging

from models.board_position import BoardPosition
from models.sudoku_grid import SudokuGrid
from models.sudoku_solver import SudokuSolver
from utils.grid_display import print_grid

PUZZLE = [
    [1, 0, 2, 0, 0, 0, 0, 0, 0],
    [0, 4, 9, 0, 0, 0, 0, 0, 0],
    [0, 8, 6, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
]


class SudokuApp:
    def __init__(self, puzzle=PUZZLE):
        self.grid = SudokuGrid(puzzle)
        self.sudoku_solver = SudokuSolver(self.grid)

    def run(self):
        """Check the starting grid, solve it in place and print the result"""
        initial_valid = self.grid.is_valid()
        print(f"Initial grid valid: {initial_valid}")
        print_grid(self.grid, "Initial Grid:")

        print("\nSolving Sudoku...")
        solved = self.sudoku_solver.solve(BoardPosition(0, 0))

        if solved:
            print("Sudoku solved!")
            print_grid(self.grid, "Solution:")
        else:
            print("Could not solve Sudoku.")
            if not initial_valid:
                print("The grid contains invalid numbers (duplicates in row/column/box).")
            print_grid(self.grid, "Grid:")

        print(f"\nPlacements: {self.sudoku_solver.placements}, "
              f"Backtracks: {self.sudoku_solver.backtracks}, Time: {self.sudoku_solver.elapsed_time:.4f}s")
        return solved


def main():
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    app = SudokuApp()
    app.run()


if __name__ == "__main__":
    main()
