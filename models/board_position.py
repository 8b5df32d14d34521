from functools import total_ordering

BOARD_SIZE = 9


class BoardPositionError(IndexError):
    """Raised when a position does not lie on the 9x9 board"""


class EndOfBoardError(IndexError):
    """Raised when advancing past the last cell of the board"""


@total_ordering
class BoardPosition:
    """A (row, col) cell coordinate, ordered row-major"""

    def __init__(self, row, col):
        if not (isinstance(row, int) and isinstance(col, int)):
            raise BoardPositionError(f"The board position {row!r}, {col!r} is not a pair of integers!")
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            raise BoardPositionError(f"The board position {row}, {col} is not on the board!")
        self.row = row
        self.col = col

    def __repr__(self):
        return f"BoardPosition({self.row}, {self.col})"

    def __eq__(self, other):
        if not isinstance(other, BoardPosition):
            return NotImplemented
        return (self.row, self.col) == (other.row, other.col)

    def __lt__(self, other):
        if not isinstance(other, BoardPosition):
            return NotImplemented
        return (self.row, self.col) < (other.row, other.col)

    def __hash__(self):
        return hash((self.row, self.col))

    def is_at_end(self):
        return self.row == BOARD_SIZE - 1 and self.col == BOARD_SIZE - 1

    def next_position(self):
        """Next cell in row-major order"""
        if self.is_at_end():
            raise EndOfBoardError("next_position called at end of board")

        if self.col == BOARD_SIZE - 1:
            return BoardPosition(self.row + 1, 0)
        return BoardPosition(self.row, self.col + 1)


def all_positions():
    """Yield all 81 board positions in row-major order"""
    position = BoardPosition(0, 0)
    while True:
        yield position
        if position.is_at_end():
            return
        position = position.next_position()
