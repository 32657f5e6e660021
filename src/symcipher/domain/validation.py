"""Plaintext membership checks."""

from __future__ import annotations

from symcipher.domain.alphabet import index_of


def first_invalid(text: str) -> tuple[int, str] | None:
    """Return ``(position, character)`` of the first non-member, or None."""
    for position, char in enumerate(text):
        if index_of(char) is None:
            return position, char
    return None


def is_valid(text: str) -> bool:
    """True iff *text* is non-empty and every character is in the alphabet.

    Empty text is rejected: there is nothing to encrypt and no key
    length to derive from it.
    """
    return bool(text) and first_invalid(text) is None
