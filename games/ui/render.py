from __future__ import annotations

from typing import Tuple

from games.core.grid_state import EMPTY, Cell, GridState
from games.core.word_state import WordStatus

# On-screen keyboard, QWERTY order.
KEYBOARD_ROWS: Tuple[str, ...] = ("QWERTYUIOP", "ASDFGHJKL", "ZXCVBNM")

_WORD_STATUS_TEXT = {
    "won": "You won!",
    "lost": "Game over!",
    "in_progress": "In progress",
}

# Placeholder shown on empty grid buttons (a blank label collapses the button).
EMPTY_CELL_LABEL = " "


def word_status_text(status: WordStatus) -> str:
    return _WORD_STATUS_TEXT[status]


def attempts_color(count: int) -> str:
    """Streamlit markdown colour for the remaining-attempts counter."""
    if count <= 1:
        return "red"
    if count <= 2:
        return "orange"
    return "green"


def attempts_label(count: int) -> str:
    noun = "attempt" if count == 1 else "attempts"
    return f"Remaining {noun}: {count}"


def grid_status_text(state: GridState) -> str:
    if state.winner:
        return f"Player {state.winner} wins!"
    if state.is_tie:
        return "It's a tie!"
    return f"Current turn: {state.current_mark}"


def cell_label(cell: Cell) -> str:
    return EMPTY_CELL_LABEL if cell == EMPTY else cell


__all__ = [
    "KEYBOARD_ROWS",
    "EMPTY_CELL_LABEL",
    "word_status_text",
    "attempts_color",
    "attempts_label",
    "grid_status_text",
    "cell_label",
]
