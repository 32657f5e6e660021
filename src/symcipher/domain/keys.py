"""Key helpers: digit inspection, manual parsing, random generation.

A key is a non-negative integer whose decimal digits are the
per-character shift amounts. Its digit count must equal the length of
the text it encrypts.
"""

from __future__ import annotations

import random


def digit_length(key: int) -> int:
    """Number of decimal digits in *key*."""
    return len(str(key))


def key_digits(key: int) -> list[int]:
    """Decimal digits of *key*, most significant first."""
    return [int(d) for d in str(key)]


def parse_key(raw: str) -> int:
    """Parse a manually entered key.

    Leading zeros are dropped (``"012"`` is the two-digit key ``12``).

    Raises:
        ValueError: If *raw* is not a non-negative decimal integer.
    """
    cleaned = raw.strip()
    if not cleaned.isdecimal() or not cleaned.isascii():
        msg = f"Not a non-negative integer: {raw!r}"
        raise ValueError(msg)
    return int(cleaned)


def random_key(length: int, rng: random.Random | None = None) -> int:
    """Generate a key with exactly *length* digits.

    The value is uniform over ``[10**(length-1), 2 * 10**(length-1))``.
    Every value in that range has *length* digits.

    Raises:
        ValueError: If *length* is less than 1.
    """
    if length < 1:
        msg = f"Key length must be at least 1, got {length}"
        raise ValueError(msg)
    rng = rng or random.Random()
    tens = 10 ** (length - 1)
    return tens + rng.randrange(tens)
