"""Shared test fixtures for basedirs."""

from __future__ import annotations

from pathlib import Path, PurePosixPath, PureWindowsPath

import pytest

from basedirs.platforms.macos import MacStrategy
from basedirs.platforms.unix import UnixStrategy
from basedirs.platforms.windows import WindowsStrategy
from basedirs.util.types import Identity

RESOLVER_ENV_VARS = (
    "HOME",
    "USERPROFILE",
    "LOCALAPPDATA",
    "XDG_CONFIG_HOME",
    "XDG_DATA_HOME",
    "XDG_STATE_HOME",
)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every variable the resolvers consult."""
    for name in RESOLVER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture()
def identity() -> Identity:
    """Provide an identity whose segments are all distinct."""
    return Identity("MyCo", "CoolApp", "net.MyCo.CoolApp")


@pytest.fixture()
def windows() -> WindowsStrategy:
    return WindowsStrategy(path_cls=PureWindowsPath)


@pytest.fixture()
def macos() -> MacStrategy:
    return MacStrategy(path_cls=PurePosixPath)


@pytest.fixture()
def unix() -> UnixStrategy:
    return UnixStrategy(path_cls=PurePosixPath)


@pytest.fixture()
def xdg_tmp(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Point HOME and the XDG variables into a temporary directory."""
    clean_env.setenv("HOME", str(tmp_path / "home"))
    clean_env.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    clean_env.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    clean_env.setenv("XDG_STATE_HOME", str(tmp_path / "state"))
    return tmp_path
