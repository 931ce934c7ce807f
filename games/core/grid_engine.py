from __future__ import annotations

import logging
import warnings
from typing import List, Optional, Tuple

from .errors import InvalidMove
from .grid_state import (
    EMPTY,
    SIZE,
    Board,
    Cell,
    GridState,
    Mark,
    Position,
    WinningLine,
    empty_board,
)

logger = logging.getLogger(__name__)

# Rows top to bottom, columns left to right, then the two diagonals.
WINNING_LINES: Tuple[WinningLine, ...] = (
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)


def create(enable_warnings: bool = True) -> GridState:
    """
    Start a new game: empty board, X to move, status "pending".

    Parameters
    ----------
    enable_warnings : bool, optional
        Issue an `InvalidMove` warning whenever a move is rejected (default: True).
    """
    return GridState(board=empty_board(), enable_warnings=enable_warnings)


def _other(mark: Mark) -> Mark:
    return "O" if mark == "X" else "X"


def _valid_index(value: object) -> bool:
    # bool is an int subclass; True/False are not board indices.
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value < SIZE


def _reject(state: GridState, message: str) -> GridState:
    logger.debug("rejected move: %s", message)
    if state.enable_warnings:
        warnings.warn(message, InvalidMove, stacklevel=3)
    return state


def find_winning_line(board: Board, mark: Mark) -> Optional[WinningLine]:
    """First canonical line fully held by `mark`, or None."""
    for line in WINNING_LINES:
        if all(board[r][c] == mark for r, c in line):
            return line
    return None


def move(state: GridState, row: int, col: int) -> GridState:
    """
    Place the current mark at (`row`, `col`) and return the resulting snapshot.

    Behavior
    --------
    - Rejected (same instance returned) if the game is finished, if `row` or
      `col` is not an integer in 0..2, or if the cell is occupied. Rejections
      never raise; with `enable_warnings` they issue an `InvalidMove` warning.
    - The first move turns "pending" into "in_progress".
    - Completing one of the 8 canonical lines finishes the game with the mover
      as winner; filling the board without a line finishes it as a tie. In
      both cases `current_mark` stays on the mover.
    - Otherwise the turn passes to the other mark.
    """
    if state.is_finished:
        return _reject(state, "The game is over")

    if not _valid_index(row) or not _valid_index(col):
        return _reject(state, f"Invalid move: row {row!r} and col {col!r} must be integers between 0-2")

    if state.board[row][col] != EMPTY:
        return _reject(state, f"Invalid move: cell at row {row}, col {col} is already occupied")

    mover = state.current_mark
    board = tuple(
        tuple(mover if (r, c) == (row, col) else cell for c, cell in enumerate(cells))
        for r, cells in enumerate(state.board)
    )

    line = find_winning_line(board, mover)
    tied = line is None and all(cell != EMPTY for cells in board for cell in cells)

    if line is not None or tied:
        status = "finished"
        next_mark = mover
    else:
        status = "in_progress"
        next_mark = _other(mover)

    logger.debug("%s played (%d, %d), status=%s", mover, row, col, status)
    return GridState(
        board=board,
        current_mark=next_mark,
        status=status,
        winning_mark=mover if line is not None else None,
        winning_line=line,
        tied=tied,
        enable_warnings=state.enable_warnings,
    )


def reset(state: GridState) -> GridState:
    """Fresh game; keeps the warnings setting of `state`."""
    return create(enable_warnings=state.enable_warnings)


def board_rows(state: GridState) -> List[List[Cell]]:
    """Mutable deep copy of the board, one list per row."""
    return [list(row) for row in state.board]


def available_moves(state: GridState) -> List[Position]:
    """Empty cells in row-major order; empty once the game is finished."""
    if state.is_finished:
        return []
    return [
        (r, c)
        for r, cells in enumerate(state.board)
        for c, cell in enumerate(cells)
        if cell == EMPTY
    ]


def is_winning_cell(state: GridState, row: int, col: int) -> bool:
    return state.winning_line is not None and (row, col) in state.winning_line


__all__ = [
    "WINNING_LINES",
    "create",
    "move",
    "reset",
    "board_rows",
    "available_moves",
    "is_winning_cell",
    "find_winning_line",
]
