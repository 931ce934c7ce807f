from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Tuple

from .errors import InvalidConfiguration


Mark = Literal["X", "O"]
Cell = Literal["", "X", "O"]
GridStatus = Literal["pending", "in_progress", "finished"]

Board = Tuple[Tuple[Cell, ...], ...]
Position = Tuple[int, int]
WinningLine = Tuple[Position, Position, Position]

SIZE = 3
EMPTY: Cell = ""
MARKS: Tuple[Mark, Mark] = ("X", "O")


def empty_board() -> Board:
    return tuple(tuple(EMPTY for _ in range(SIZE)) for _ in range(SIZE))


@dataclass(frozen=True)
class GridState:
    """
    Immutable snapshot of a tic-tac-toe game.

    Notes
    -----
    - Unlike the letter game, `status` is stored: "pending" vs "in_progress"
      depends on whether any move was made, not only on the board contents.
    - `current_mark` is the mark to move next; once the game is finished it
      keeps the mark that made the last move.
    - The board is a tuple of tuples, so handing it out cannot leak mutation.
    """

    board: Board
    current_mark: Mark = "X"
    status: GridStatus = "pending"
    winning_mark: Optional[Mark] = None
    winning_line: Optional[WinningLine] = None
    tied: bool = False
    enable_warnings: bool = True

    def __post_init__(self) -> None:
        board = tuple(tuple(row) for row in self.board)
        if len(board) != SIZE or any(len(row) != SIZE for row in board):
            raise InvalidConfiguration("`board` must be 3 rows by 3 columns.")
        if any(cell not in (EMPTY, *MARKS) for row in board for cell in row):
            raise InvalidConfiguration("board cells must be '', 'X' or 'O'.")
        object.__setattr__(self, "board", board)

        if self.current_mark not in MARKS:
            raise InvalidConfiguration("`current_mark` must be 'X' or 'O'.")
        if self.status not in ("pending", "in_progress", "finished"):
            raise InvalidConfiguration("`status` must be one of {'pending', 'in_progress', 'finished'}.")
        if self.winning_mark is not None and self.tied:
            raise InvalidConfiguration("a game cannot be both won and tied.")
        if (self.winning_mark is None) != (self.winning_line is None):
            raise InvalidConfiguration("`winning_mark` and `winning_line` are set together.")
        if self.winning_line is not None:
            line = tuple(tuple(pos) for pos in self.winning_line)
            if len(line) != SIZE or any(
                len(pos) != 2 or not all(isinstance(i, int) and 0 <= i < SIZE for i in pos)
                for pos in line
            ):
                raise InvalidConfiguration("`winning_line` must be 3 (row, col) pairs on the board.")
            object.__setattr__(self, "winning_line", line)

    @property
    def is_finished(self) -> bool:
        return self.status == "finished"

    @property
    def is_tie(self) -> bool:
        return self.tied

    @property
    def winner(self) -> Optional[Mark]:
        return self.winning_mark

    @property
    def move_count(self) -> int:
        return sum(1 for row in self.board for cell in row if cell != EMPTY)
