"""Encryption method codes and session prompt prefixes."""

from __future__ import annotations

from enum import StrEnum


class EncryptionMethod(StrEnum):
    """Key strategies, valued by the code typed at the method prompt."""

    MANUAL = "0"
    RANDOM = "1"

    @property
    def label(self) -> str:
        return "Manual" if self is EncryptionMethod.MANUAL else "Random"

    @classmethod
    def parse(cls, value: str) -> EncryptionMethod | None:
        """Resolve a method code (``"0"``/``"1"``) or name, or None."""
        cleaned = value.strip().lower()
        for method in cls:
            if cleaned in (method.value, method.name.lower()):
                return method
        return None


class PromptPrefix(StrEnum):
    """Leading word of the text prompt for the current session attempt."""

    ENTER = "Enter"
    REENTER = "Re-enter"
