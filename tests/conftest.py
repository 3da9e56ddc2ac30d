"""Shared test fixtures for wsroot."""

import os

import pytest

from wsroot.paths import ROOT_ENV_VAR


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's WORKSPACE_ROOT out of every test."""
    monkeypatch.delenv(ROOT_ENV_VAR, raising=False)


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """An existing, empty workspace root exported via WORKSPACE_ROOT."""
    ws = tmp_path / "ws"
    ws.mkdir()
    monkeypatch.setenv(ROOT_ENV_VAR, str(ws))
    return ws


@pytest.fixture
def unreadable(monkeypatch):
    """Make directories whose name ends with the given suffix fail to list."""
    real_scandir = os.scandir
    denied: list[str] = []

    def fake_scandir(path):
        if any(os.fspath(path).endswith(os.sep + name) for name in denied):
            raise PermissionError(13, "Permission denied", os.fspath(path))
        return real_scandir(path)

    monkeypatch.setattr("wsroot.traverse.os.scandir", fake_scandir)
    return denied.append
