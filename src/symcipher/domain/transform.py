"""The per-character shift transform.

Each character moves forward in the alphabet by the decimal digit of the
key at the same position. Indices past the end wrap by a single
subtraction of the alphabet size, which equals a modulo here because a
shifted index never exceeds ``26 + 9``.

There is no inverse operation.
"""

from __future__ import annotations

from symcipher.domain.alphabet import ALPHABET_SIZE, index_of, symbol_at
from symcipher.domain.keys import key_digits

_LAST_INDEX = ALPHABET_SIZE - 1


def shift_index(index: int, digit: int) -> int:
    """Shift an alphabet *index* by *digit*, wrapping once past the end."""
    shifted = index + digit
    if shifted > _LAST_INDEX:
        shifted -= ALPHABET_SIZE
    return shifted


def shift(text: str, key: int) -> str:
    """Encrypt *text* with *key*.

    The caller guarantees that *key* has exactly ``len(text)`` digits.
    Characters outside the alphabet contribute nothing to the output but
    still consume their key digit.

    Examples:
        >>> shift("cat", 123)
        'dcw'
        >>> shift("z", 5)
        'd'
    """
    digits = key_digits(key)
    out: list[str] = []
    for position, char in enumerate(text):
        index = index_of(char)
        if index is None:
            continue
        out.append(symbol_at(shift_index(index, digits[position])))
    return "".join(out)
