from __future__ import annotations

import logging
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

import pocketgames

APP = str(Path(__file__).resolve().parents[1] / "pocketgames.py")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("POCKETGAMES_WORD_TARGET", "POCKETGAMES_WORD_ATTEMPTS", "POCKETGAMES_GRID_WARNINGS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def _run() -> AppTest:
    at = AppTest.from_file(APP, default_timeout=30)
    at.run()
    assert not at.exception
    return at


def test_letter_guess_starts_with_default_phrase() -> None:
    at = _run()
    game = at.session_state["word_game"]
    assert game.target_word == "HELLO, WORLD!"
    assert game.max_attempts == 5


def test_clicking_a_letter_reveals_it() -> None:
    at = _run()
    at.button(key="letter_L").click().run()
    assert not at.exception

    game = at.session_state["word_game"]
    assert "L" in game.visible_letters
    assert at.button(key="letter_L").disabled


def test_env_overrides_word_game(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POCKETGAMES_WORD_TARGET", "ab")
    monkeypatch.setenv("POCKETGAMES_WORD_ATTEMPTS", "2")
    game = _run().session_state["word_game"]
    assert game.target_word == "AB"
    assert game.max_attempts == 2


def test_bad_env_falls_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POCKETGAMES_WORD_TARGET", "!!!")
    monkeypatch.setenv("POCKETGAMES_WORD_ATTEMPTS", "zero")
    game = _run().session_state["word_game"]
    assert game.target_word == "HELLO, WORLD!"


def test_tic_tac_toe_move() -> None:
    at = _run()
    at.sidebar.radio[0].set_value("Tic-Tac-Toe").run()
    at.button(key="cell_1_1").click().run()
    assert not at.exception

    game = at.session_state["grid_game"]
    assert game.board[1][1] == "X"
    assert game.current_mark == "O"
    assert at.button(key="cell_1_1").disabled


@pytest.mark.parametrize(("raw", "expected"), [("debug", logging.DEBUG), (" Info ", logging.INFO), ("ERROR", logging.ERROR)])
def test_log_level_reads_env(monkeypatch: pytest.MonkeyPatch, raw: str, expected: int) -> None:
    monkeypatch.setenv("LOG_LEVEL", raw)
    assert pocketgames._log_level() == expected


@pytest.mark.parametrize("raw", ["verbose", "", "Level 5"])
def test_unknown_log_level_falls_back_to_warning(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("LOG_LEVEL", raw)
    assert pocketgames._log_level() == logging.WARNING


def test_app_starts_with_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    _run()


def test_target_with_backtick_renders_as_code(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POCKETGAMES_WORD_TARGET", "a`b")
    at = _run()
    assert at.session_state["word_game"].target_word == "A`B"
    assert at.code[0].value == "_ ` _"
