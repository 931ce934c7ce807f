from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Literal, Optional

from .errors import InvalidConfiguration
from .letters import is_letter, is_space


WordStatus = Literal["in_progress", "won", "lost"]

MASK = "_"


@dataclass(frozen=True)
class CharacterInfo:
    """Display projection of one character of the target word."""

    value: str
    is_letter: bool
    is_space: bool
    is_visible: bool
    display_value: str


@dataclass(frozen=True)
class WordGuessState:
    """
    Immutable snapshot of a letter-guessing game.

    Notes
    -----
    - Transitions live in `core.word_engine`; they return a new snapshot (or
      this one, unchanged) instead of mutating fields.
    - Status and remaining attempts are *derived* from the set sizes and never
      stored, so a snapshot cannot disagree with itself.
    - All containers are frozensets: callers may hold on to them freely.
    """

    target_word: str
    max_attempts: int
    clicked_letters: FrozenSet[str] = field(default_factory=frozenset)
    visible_letters: FrozenSet[str] = field(default_factory=frozenset)
    target_unique_letters: Optional[FrozenSet[str]] = None

    def __post_init__(self) -> None:
        """
        Normalize and validate fields.

        Normalization
        -------------
        - `target_word` is upper-cased.
        - `clicked_letters` / `visible_letters` are upper-cased frozensets.
        - `target_unique_letters` is always derived from `target_word`.

        Validation
        ----------
        - `max_attempts` must be an int >= 1.
        - `target_word` must contain at least one letter.
        - `target_unique_letters`, when given, must match the letters of `target_word`.
        - `visible_letters` must be a subset of clicked ∩ target letters.
        """
        if not isinstance(self.target_word, str):
            raise InvalidConfiguration("`target_word` must be a string.")
        if isinstance(self.max_attempts, bool) or not isinstance(self.max_attempts, int):
            raise InvalidConfiguration("`max_attempts` must be an integer.")
        if self.max_attempts < 1:
            raise InvalidConfiguration("`max_attempts` must be at least 1.")

        # Frozen dataclass: normalization goes through object.__setattr__.
        word = self.target_word.upper()
        object.__setattr__(self, "target_word", word)

        unique = frozenset(ch for ch in word if is_letter(ch))
        if not unique:
            raise InvalidConfiguration("`target_word` must contain at least one letter.")
        given = self.target_unique_letters
        if given is not None and frozenset(c.upper() for c in given) != unique:
            raise InvalidConfiguration("`target_unique_letters` must be the letters of `target_word`.")
        object.__setattr__(self, "target_unique_letters", unique)

        clicked = frozenset(c.upper() for c in self.clicked_letters)
        visible = frozenset(c.upper() for c in self.visible_letters)
        if not visible <= (clicked & unique):
            raise InvalidConfiguration("`visible_letters` must be guessed letters of the target.")
        object.__setattr__(self, "clicked_letters", clicked)
        object.__setattr__(self, "visible_letters", visible)

    @property
    def attempts_remaining(self) -> int:
        wrong = len(self.clicked_letters) - len(self.visible_letters)
        return self.max_attempts - wrong

    @property
    def status(self) -> WordStatus:
        if len(self.target_unique_letters) - len(self.visible_letters) == 0:
            return "won"
        if self.attempts_remaining <= 0:
            return "lost"
        return "in_progress"

    @property
    def is_over(self) -> bool:
        return self.status != "in_progress"

    @property
    def wrong_letters(self) -> FrozenSet[str]:
        return self.clicked_letters - self.visible_letters

    def character_info(self, ch: str) -> CharacterInfo:
        letter = is_letter(ch)
        visible = letter and ch in self.visible_letters
        return CharacterInfo(
            value=ch,
            is_letter=letter,
            is_space=is_space(ch),
            is_visible=visible,
            display_value=ch if (visible or not letter) else MASK,
        )
