from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

from .letters import is_letter
from .word_state import MASK, CharacterInfo, WordGuessState
from .wordlist import Chooser, attempts_for, pick_word

logger = logging.getLogger(__name__)


def create(max_attempts: int, target_word: str) -> WordGuessState:
    """
    Start a new game for `target_word` with `max_attempts` wrong guesses allowed.

    Parameters
    ----------
    max_attempts : int
        Number of incorrect guesses allowed before the game is lost (>= 1).
    target_word : str
        Word or phrase to guess. Case-insensitive; stored upper-cased. Spaces and
        punctuation are shown as-is and never need guessing.

    Returns
    -------
    WordGuessState
        A fresh snapshot with nothing clicked.

    Raises
    ------
    InvalidConfiguration
        If `max_attempts < 1` or the target holds no letter.
    """
    return WordGuessState(target_word=target_word, max_attempts=max_attempts)


def create_random(rng: Optional[Chooser] = None, words: Optional[Sequence[str]] = None) -> WordGuessState:
    """
    Start a new game on a randomly picked word.

    The attempt budget follows the word's letter count (see `wordlist.attempts_for`).
    Raises `InvalidConfiguration` if the candidate list is empty.
    """
    word = pick_word(rng=rng, words=words)
    return create(attempts_for(word), word)


def guess_letter(state: WordGuessState, letter: str) -> WordGuessState:
    """
    Apply a single-letter guess and return the resulting snapshot.

    Behavior
    --------
    - Returns `state` unchanged if the game is already won or lost.
    - Returns `state` unchanged for anything but a single letter a–z/A–Z;
      such input never costs an attempt.
    - Repeated guesses (case-insensitive) are no-ops.
    - A correct letter is added to both clicked and visible sets; a wrong one
      only to the clicked set, which uses up one attempt.
    """
    if state.status != "in_progress":
        return state

    if not is_letter(letter):
        logger.debug("ignoring non-letter guess %r", letter)
        return state

    ch = letter.upper()
    if ch in state.clicked_letters:
        return state  # repeated guess; no changes

    clicked = state.clicked_letters | {ch}
    hit = ch in state.target_unique_letters
    visible = state.visible_letters | {ch} if hit else state.visible_letters

    new_state = WordGuessState(
        target_word=state.target_word,
        max_attempts=state.max_attempts,
        clicked_letters=clicked,
        visible_letters=visible,
        target_unique_letters=state.target_unique_letters,
    )
    logger.debug(
        "guess %s: %s, %d attempts left, status=%s",
        ch,
        "hit" if hit else "miss",
        new_state.attempts_remaining,
        new_state.status,
    )
    return new_state


def reset(state: WordGuessState) -> WordGuessState:
    """Same target and budget, fresh progress."""
    return create(state.max_attempts, state.target_word)


def characters(state: WordGuessState) -> Tuple[CharacterInfo, ...]:
    """Per-character display info for the target word, in order."""
    return tuple(state.character_info(ch) for ch in state.target_word)


def mask_word(state: WordGuessState, placeholder: str = MASK, sep: str = " ") -> str:
    """
    Return a masked representation of the target, e.g. '_ _ L L _ ,   _ _ _ L _ !'.

    Notes
    -----
    - Letters not yet revealed are replaced by `placeholder`.
    - Non-letters are always shown.
    """
    return sep.join(
        info.value if (info.is_visible or not info.is_letter) else placeholder
        for info in characters(state)
    )


__all__ = ["create", "create_random", "guess_letter", "reset", "characters", "mask_word"]
