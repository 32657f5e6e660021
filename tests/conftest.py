"""Shared pytest fixtures for symcipher tests."""

from __future__ import annotations

import random
from pathlib import Path

import pytest
from click.testing import CliRunner

from symcipher.services.encryption import EncryptionService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def service() -> EncryptionService:
    """EncryptionService with a fixed random source."""
    return EncryptionService(random.Random(1234))


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no symcipher config in scope.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes so a stray ``symcipher.toml`` or ``SYMCIPHER_*`` variable on
    the developer's machine can't leak into the run.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SYMCIPHER_CONFIG", raising=False)
    monkeypatch.delenv("SYMCIPHER_SESSION__MAX_ATTEMPTS", raising=False)
    monkeypatch.delenv("SYMCIPHER_KEYS__SEED", raising=False)
