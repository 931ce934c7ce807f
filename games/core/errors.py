from __future__ import annotations


class InvalidConfiguration(ValueError):
    """Raised when a game cannot be created from the given arguments."""


class InvalidMove(UserWarning):
    """
    Warning category for a rejected grid move.

    The engine never raises this; it is issued through `warnings.warn` so the
    caller can ignore it, log it, or escalate it with a warnings filter.
    """


__all__ = ["InvalidConfiguration", "InvalidMove"]
