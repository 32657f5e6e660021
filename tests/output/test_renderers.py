"""Tests for the Rich renderers."""

from symcipher.domain.alphabet import ALPHABET
from symcipher.output.renderers import render_quiet, render_result
from symcipher.services.result import ServiceResult


def _encrypted(text: str = "cat", ciphertext: str = "dcw", key: int = 123) -> ServiceResult:
    return ServiceResult(
        ok=True,
        op="encrypt_manual",
        data={"method": "manual", "text": text, "ciphertext": ciphertext, "key": key},
    )


class TestEncryptRenderer:
    def test_fields(self) -> None:
        out = render_result(_encrypted())
        lines = out.splitlines()
        assert lines[0] == "OK  encrypt_manual"
        assert "  method: manual" in lines
        assert "  ciphertext: 'dcw'" in lines
        assert "  key: 123" in lines

    def test_plaintext_only_when_verbose(self) -> None:
        assert "text: 'cat'" not in render_result(_encrypted())
        assert "text: 'cat'" in render_result(_encrypted(), verbose=True)

    def test_trailing_space_is_visible(self) -> None:
        out = render_result(_encrypted(text="ab", ciphertext="a ", key=26))
        assert "ciphertext: 'a '" in out

    def test_no_ansi_outside_terminal(self) -> None:
        assert "\x1b" not in render_result(_encrypted())


class TestAlphabetRenderer:
    def test_lists_symbols(self) -> None:
        symbols = [{"index": i, "symbol": s} for i, s in enumerate(ALPHABET)]
        result = ServiceResult(ok=True, op="alphabet", data={"size": 27, "symbols": symbols})
        out = render_result(result)
        assert "OK  alphabet" in out
        assert "(space)" in out
        assert "26" in out


class TestGenericAndErrors:
    def test_generic(self) -> None:
        result = ServiceResult(ok=True, op="validate", data={"valid": True, "length": 3})
        out = render_result(result)
        assert "OK  validate" in out
        assert "  valid: True" in out
        assert "  length: 3" in out

    def test_error(self) -> None:
        result = ServiceResult.failure("encrypt", "INVALID_METHOD", "Invalid method selected.")
        assert render_result(result) == "ERROR  encrypt — Invalid method selected."

    def test_error_detail_when_verbose(self) -> None:
        result = ServiceResult.failure(
            "validate", "NON_ALPHABETIC_INPUT", "Non-alphabetic character detected.", char="!"
        )
        out = render_result(result, verbose=True)
        assert "code: NON_ALPHABETIC_INPUT" in out
        assert "char: '!'" in out


class TestQuiet:
    def test_ciphertext_only(self) -> None:
        assert render_quiet(_encrypted()) == "dcw"

    def test_other_ops(self) -> None:
        assert render_quiet(ServiceResult(ok=True, op="alphabet")) == "OK: alphabet"
