from __future__ import annotations

import logging
import secrets
from typing import Optional, Protocol, Sequence

from .errors import InvalidConfiguration
from .letters import is_letter

logger = logging.getLogger(__name__)

# Starting game of the letter-guess page.
DEFAULT_TARGET = "HELLO, WORLD!"
DEFAULT_MAX_ATTEMPTS = 5

# Built-in table. Phrases may carry spaces and punctuation; only letters are guessed.
WORDS: tuple[str, ...] = (
    "HELLO, WORLD!",
    "PYTHON",
    "IMMUTABLE",
    "SNAPSHOT",
    "KEYBOARD",
    "TIC-TAC-TOE",
    "OPEN SOURCE",
    "UNIT TESTING",
    "STATE MACHINE",
    "PURE FUNCTIONS",
    "GUESS THE LETTER",
    "READ THE DOCS",
    "DON'T PANIC!",
    "FROZEN DATACLASS",
    "NEVER MUTATE IN PLACE",
    "THE QUICK BROWN FOX JUMPS",
)


class Chooser(Protocol):
    """Anything with a `choice` method, e.g. `random.Random(seed)`."""

    def choice(self, seq: Sequence[str]) -> str: ...


def letter_count(word: str) -> int:
    """Number of alphabetic characters in `word` (spaces/punctuation excluded)."""
    return sum(1 for ch in word if is_letter(ch))


def attempts_for(word: str) -> int:
    """
    Derive the attempt budget from the length of `word`.

    Spaces and punctuation count towards the length.

    Tiers
    -----
    - <= 6 chars  : 5
    - 7..12 chars : 6 + (n - 7) // 2
    - 13..18 chars: 9 + (n - 13) // 2
    - >= 19 chars : 12 (cap)
    """
    n = len(word)
    if n <= 6:
        return 5
    if n <= 12:
        return 6 + (n - 7) // 2
    if n <= 18:
        return 9 + (n - 13) // 2
    return 12


def pick_word(rng: Optional[Chooser] = None, words: Optional[Sequence[str]] = None) -> str:
    """
    Pick one entry uniformly at random.

    Parameters
    ----------
    rng : Chooser | None
        Source of randomness. Defaults to `secrets.SystemRandom()`; tests pass a
        seeded `random.Random` (or any object with `choice`) for reproducibility.
    words : Sequence[str] | None
        Candidate list. Defaults to the built-in `WORDS` table.

    Raises
    ------
    InvalidConfiguration
        If the candidate list is empty.
    """
    pool = list(WORDS if words is None else words)
    if not pool:
        raise InvalidConfiguration("word list is empty")
    chooser = rng if rng is not None else secrets.SystemRandom()
    word = chooser.choice(pool)
    logger.debug("picked word of %d letters", letter_count(word))
    return word


__all__ = [
    "DEFAULT_TARGET",
    "DEFAULT_MAX_ATTEMPTS",
    "WORDS",
    "attempts_for",
    "letter_count",
    "pick_word",
]
