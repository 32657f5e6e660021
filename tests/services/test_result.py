"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from symcipher.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="encrypt_manual", data={"ciphertext": "dcw"})
        assert result.ok is True
        assert result.op == "encrypt_manual"
        assert result.data == {"ciphertext": "dcw"}
        assert result.error is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="INVALID_METHOD", message="Invalid method selected.")
        result = ServiceResult(ok=False, op="encrypt", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_METHOD"

    def test_failure_shorthand(self) -> None:
        result = ServiceResult.failure("encrypt_manual", "KEY_LENGTH_MISMATCH", "bad", key_length=2)
        assert result.ok is False
        assert result.op == "encrypt_manual"
        assert result.error is not None
        assert result.error.message == "bad"
        assert result.error.detail == {"key_length": 2}
        assert result.data == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="encrypt_random", data={"key": 123})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["key"] == 123

    def test_fields(self) -> None:
        assert set(ServiceResult.model_fields) == {"ok", "op", "data", "error"}

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_default_detail(self) -> None:
        error = ServiceError(code="E", message="bad")
        assert error.detail == {}
