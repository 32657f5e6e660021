"""Tests for method codes and prompt prefixes."""

import pytest

from symcipher.domain.types import EncryptionMethod, PromptPrefix


class TestEncryptionMethod:
    def test_codes(self) -> None:
        assert EncryptionMethod.MANUAL == "0"
        assert EncryptionMethod.RANDOM == "1"

    def test_labels(self) -> None:
        assert EncryptionMethod.MANUAL.label == "Manual"
        assert EncryptionMethod.RANDOM.label == "Random"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("0", EncryptionMethod.MANUAL),
            ("1", EncryptionMethod.RANDOM),
            ("manual", EncryptionMethod.MANUAL),
            ("RANDOM", EncryptionMethod.RANDOM),
            (" 1 ", EncryptionMethod.RANDOM),
        ],
    )
    def test_parse(self, raw: str, expected: EncryptionMethod) -> None:
        assert EncryptionMethod.parse(raw) is expected

    @pytest.mark.parametrize("raw", ["", "2", "yes", "01"])
    def test_parse_unknown(self, raw: str) -> None:
        assert EncryptionMethod.parse(raw) is None


class TestPromptPrefix:
    def test_values(self) -> None:
        assert str(PromptPrefix.ENTER) == "Enter"
        assert str(PromptPrefix.REENTER) == "Re-enter"
