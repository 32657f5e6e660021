"""The fixed 27-symbol alphabet: ``a``..``z`` at 0..25, space at 26.

INVARIANT: No duplicate symbols. A symbol's index is its rotation position.
"""

from __future__ import annotations

import string

ALPHABET: tuple[str, ...] = (*string.ascii_lowercase, " ")
ALPHABET_SIZE = len(ALPHABET)

_INDEX: dict[str, int] = {symbol: index for index, symbol in enumerate(ALPHABET)}


def index_of(symbol: str) -> int | None:
    """Return the alphabet position of *symbol*, or None for non-members.

    Examples:
        >>> index_of("c")
        2
        >>> index_of(" ")
        26
        >>> index_of("A") is None
        True
    """
    return _INDEX.get(symbol)


def symbol_at(index: int) -> str:
    """Return the symbol at *index*, taken modulo the alphabet size."""
    return ALPHABET[index % ALPHABET_SIZE]
