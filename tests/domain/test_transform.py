"""Tests for the shift transform."""

import random

import pytest

from symcipher.domain.alphabet import ALPHABET
from symcipher.domain.keys import random_key
from symcipher.domain.transform import shift, shift_index


class TestShiftIndex:
    def test_no_wrap(self) -> None:
        assert shift_index(2, 1) == 3

    def test_wraps_once(self) -> None:
        assert shift_index(25, 5) == 3
        assert shift_index(26, 1) == 0

    def test_boundary_stays(self) -> None:
        assert shift_index(17, 9) == 26

    def test_zero_digit_is_identity(self) -> None:
        for index in range(len(ALPHABET)):
            assert shift_index(index, 0) == index


class TestShift:
    def test_cat(self) -> None:
        assert shift("cat", 123) == "dcw"

    def test_wrap_z(self) -> None:
        assert shift("z", 5) == "d"

    def test_space_wraps_to_a(self) -> None:
        assert shift(" ", 1) == "a"

    def test_letters_can_become_space(self) -> None:
        assert shift("r", 9) == " "

    def test_multiple_wraps(self) -> None:
        assert shift("ab", 99) == "jk"
        assert shift("y z", 345) == "add"

    def test_zero_digits_keep_text(self) -> None:
        assert shift("hello", 10000) == "iello"

    def test_non_member_is_skipped_but_consumes_digit(self) -> None:
        assert shift("a!b", 123) == "be"

    @pytest.mark.parametrize("length", [1, 5, 11, 30])
    def test_length_and_membership_preserved(self, length: int) -> None:
        rng = random.Random(length)
        text = "".join(rng.choice(ALPHABET) for _ in range(length))
        key = random_key(length, rng)
        out = shift(text, key)
        assert len(out) == length
        assert all(ch in ALPHABET for ch in out)

    def test_shifting_twice_does_not_restore(self) -> None:
        once = shift("cat", 123)
        assert shift(once, 123) != "cat"
