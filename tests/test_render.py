from __future__ import annotations

import pytest

from games.core import grid_engine
from games.ui.render import (
    EMPTY_CELL_LABEL,
    KEYBOARD_ROWS,
    attempts_color,
    attempts_label,
    cell_label,
    grid_status_text,
    word_status_text,
)


def test_keyboard_covers_alphabet_once() -> None:
    keys = "".join(KEYBOARD_ROWS)
    assert sorted(keys) == list("ABCDEFGHIJKLMNOPQRSTUVWXYZ")


@pytest.mark.parametrize(
    ("status", "text"),
    [("won", "You won!"), ("lost", "Game over!"), ("in_progress", "In progress")],
)
def test_word_status_text(status: str, text: str) -> None:
    assert word_status_text(status) == text  # type: ignore[arg-type]


@pytest.mark.parametrize(("count", "color"), [(0, "red"), (1, "red"), (2, "orange"), (3, "green"), (9, "green")])
def test_attempts_color(count: int, color: str) -> None:
    assert attempts_color(count) == color


def test_attempts_label_pluralizes() -> None:
    assert attempts_label(1) == "Remaining attempt: 1"
    assert attempts_label(0) == "Remaining attempts: 0"
    assert attempts_label(4) == "Remaining attempts: 4"


def test_grid_status_text() -> None:
    state = grid_engine.create(enable_warnings=False)
    assert grid_status_text(state) == "Current turn: X"

    state = grid_engine.move(state, 0, 0)
    assert grid_status_text(state) == "Current turn: O"

    for row, col in [(1, 1), (0, 1), (1, 0), (0, 2)]:
        state = grid_engine.move(state, row, col)
    assert grid_status_text(state) == "Player X wins!"

    draw = grid_engine.create(enable_warnings=False)
    for row, col in [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)]:
        draw = grid_engine.move(draw, row, col)
    assert grid_status_text(draw) == "It's a tie!"


def test_cell_label() -> None:
    assert cell_label("") == EMPTY_CELL_LABEL
    assert cell_label("X") == "X"
    assert cell_label("O") == "O"
