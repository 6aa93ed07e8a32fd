"""Shared test fixtures for BuildGate tests."""

import sys

import pytest

from buildgate.config import BuildGateConfig


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every test from an empty directory so no stray .buildgate.yml is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def python_config():
    """Build a config whose command runs a small Python snippet."""

    def _make(code: str, timeout: float | None = None) -> BuildGateConfig:
        return BuildGateConfig(command=[sys.executable, "-c", code], timeout=timeout)

    return _make
