from __future__ import annotations

import logging
import os

import streamlit as st

from dotenv import load_dotenv
load_dotenv(override=False)  # Load .env into process env

# --- Core game imports ---
from games.core import grid_engine, word_engine
from games.core.errors import InvalidConfiguration
from games.core.grid_state import GridState
from games.core.word_state import WordGuessState
from games.core.wordlist import DEFAULT_MAX_ATTEMPTS, DEFAULT_TARGET

# --- Presentation helpers ---
from games.ui.render import (
    KEYBOARD_ROWS,
    attempts_color,
    attempts_label,
    cell_label,
    grid_status_text,
    word_status_text,
)

def _log_level(default: int = logging.WARNING) -> int:
    """LOG_LEVEL as a logging level; unknown or missing names give `default`."""
    level = logging.getLevelName(os.getenv("LOG_LEVEL", "").strip().upper())
    return level if isinstance(level, int) else default


logging.basicConfig(
    level=_log_level(),
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger("pocketgames")

GAMES = ["Letter Guess", "Tic-Tac-Toe"]


# =======================================
# Configuration (environment / .env)
# =======================================

def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _configured_word_game() -> WordGuessState:
    """
    Build the starting letter game from POCKETGAMES_WORD_TARGET / _ATTEMPTS.
    Falls back to the built-in starting game if either value is unusable.
    """
    target = os.getenv("POCKETGAMES_WORD_TARGET", DEFAULT_TARGET)
    raw_attempts = os.getenv("POCKETGAMES_WORD_ATTEMPTS", str(DEFAULT_MAX_ATTEMPTS))
    try:
        return word_engine.create(int(raw_attempts), target)
    except (ValueError, InvalidConfiguration) as exc:
        logger.warning("Invalid word game configuration (%s); using defaults.", exc)
        return word_engine.create(DEFAULT_MAX_ATTEMPTS, DEFAULT_TARGET)


# =======================================
# Session-state helpers & game management
# =======================================

def _ensure_games() -> None:
    """Ensure both game snapshots exist in session state; create them if missing."""
    if not isinstance(st.session_state.get("word_game"), WordGuessState):
        st.session_state["word_game"] = _configured_word_game()
    if not isinstance(st.session_state.get("grid_game"), GridState):
        st.session_state["grid_game"] = grid_engine.create(
            enable_warnings=_env_flag("POCKETGAMES_GRID_WARNINGS", True)
        )


def _on_letter(letter: str) -> None:
    st.session_state["word_game"] = word_engine.guess_letter(st.session_state["word_game"], letter)


def _reset_word_game() -> None:
    st.session_state["word_game"] = word_engine.reset(st.session_state["word_game"])


def _random_word_game() -> None:
    st.session_state["word_game"] = word_engine.create_random()


def _on_cell(row: int, col: int) -> None:
    st.session_state["grid_game"] = grid_engine.move(st.session_state["grid_game"], row, col)


def _reset_grid_game() -> None:
    st.session_state["grid_game"] = grid_engine.reset(st.session_state["grid_game"])


# =========
# Renderers
# =========

def render_letter_guess() -> None:
    game: WordGuessState = st.session_state["word_game"]
    st.subheader("Letter Guess")

    # ---- Board ----
    revealed = " ".join(info.display_value for info in word_engine.characters(game))
    st.code(revealed, language=None)

    remaining = game.attempts_remaining
    c1, c2 = st.columns(2)
    c1.markdown(f":{attempts_color(remaining)}[**{attempts_label(remaining)}**]")
    c2.markdown(f"**{word_status_text(game.status)}**")

    # ---- Keyboard ----
    for row in KEYBOARD_ROWS:
        cols = st.columns(len(KEYBOARD_ROWS[0]))
        for col, letter in zip(cols, row):
            col.button(
                letter,
                key=f"letter_{letter}",
                disabled=game.is_over or letter in game.clicked_letters,
                on_click=_on_letter,
                args=(letter,),
            )

    wrong = ", ".join(sorted(game.wrong_letters)) or "(none)"
    st.caption(f"Wrong letters: {wrong}")

    if game.status == "won":
        st.success("🎉 You won! Great job.")
    elif game.status == "lost":
        st.error(f"💀 Game over. The answer was: **{game.target_word}**")

    b1, b2 = st.columns(2)
    b1.button("New Game", key="word_reset", on_click=_reset_word_game)
    b2.button("🎲 Random word", key="word_random", on_click=_random_word_game)


def render_tic_tac_toe() -> None:
    game: GridState = st.session_state["grid_game"]
    st.subheader("Tic-Tac-Toe")

    if game.winner:
        st.success(f"🏆 {grid_status_text(game)}")
    elif game.is_tie:
        st.info(f"🤝 {grid_status_text(game)}")
    else:
        st.markdown(f"**{grid_status_text(game)}**")

    playable = set(grid_engine.available_moves(game))
    for r, cells in enumerate(game.board):
        cols = st.columns(3)
        for c, cell in enumerate(cells):
            label = cell_label(cell)
            if grid_engine.is_winning_cell(game, r, c):
                label = f"**{label}**"
            cols[c].button(
                label,
                key=f"cell_{r}_{c}",
                disabled=(r, c) not in playable,
                on_click=_on_cell,
                args=(r, c),
                type="primary" if grid_engine.is_winning_cell(game, r, c) else "secondary",
            )

    st.button("New Game", key="grid_reset", on_click=_reset_grid_game)


# =========
# The App
# =========

def main() -> None:
    st.set_page_config(page_title="Pocket Games", page_icon="🎲", layout="centered")
    st.title("🎲 Pocket Games")

    _ensure_games()

    # ---- Sidebar ----
    with st.sidebar:
        st.header("Games")
        choice = st.radio("Pick a game", GAMES, key="game_choice")

        with st.expander("Debug (env)"):
            st.write("LOG_LEVEL:", os.getenv("LOG_LEVEL", "WARNING"))
            st.write("POCKETGAMES_WORD_TARGET set:", bool(os.getenv("POCKETGAMES_WORD_TARGET")))
            st.write("Grid warnings:", st.session_state["grid_game"].enable_warnings)

    if choice == "Tic-Tac-Toe":
        render_tic_tac_toe()
    else:
        render_letter_guess()

    st.divider()
    st.caption("Game rules run in pure, immutable engines; this page only renders their snapshots.")


if __name__ == "__main__":
    main()
