"""Platform strategy protocol for basedirs.

Each OS family (Windows, macOS, other Unix-like) implements this Protocol.
Families are registered via platforms/registry.py and one strategy is bound
to a BaseDirs instance for its whole lifetime.

Only the family of the running OS builds concrete ``Path`` values. Any other
family computes pure paths of its own flavour, which can be shown but never
created on disk.
"""

from __future__ import annotations

import sys
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path, PurePath, PurePosixPath, PureWindowsPath
from typing import Protocol, runtime_checkable

from basedirs.core.fallback import FallbackChain
from basedirs.exceptions import PlatformMismatchError
from basedirs.util.types import Identity, PlatformFamily


def detect_family(platform: str) -> str:
    """Map a ``sys.platform`` value to a platform family name."""
    if platform in ("win32", "cygwin"):
        return "windows"
    if platform == "darwin":
        return "macos"
    return "unix"


CURRENT_FAMILY = detect_family(sys.platform)


def default_path_cls(family: str) -> type[PurePath]:
    """pathlib class a family builds with on this host."""
    if family == CURRENT_FAMILY:
        return Path
    if family == "windows":
        return PureWindowsPath
    return PurePosixPath


@runtime_checkable
class PlatformStrategy(Protocol):
    """Protocol that all platform families must satisfy."""

    family: PlatformFamily
    path_cls: type[PurePath]

    def home_dir(self) -> PurePath:
        """Resolve the user's home directory. Never empty."""
        ...

    def settings_dir(self, identity: Identity) -> PurePath:
        """Directory for device-local settings."""
        ...

    def saves_dir(self, identity: Identity) -> PurePath:
        """Directory for save data (synced or backed up)."""
        ...

    def logs_dir(self, identity: Identity) -> PurePath:
        """Directory for logs and debug output (not synced)."""
        ...

    def temp_dir(self) -> PurePath:
        """System temporary directory, independent of the identity."""
        ...

    def base_chains(self) -> dict[str, FallbackChain]:
        """Fallback chains for every base root this family consults."""
        ...


class StrategyBase(ABC):
    """Shared plumbing for the built-in strategies.

    Args:
        path_cls: pathlib class used to build results. Defaults to ``Path``
            for the running OS family and to the family's pure flavour
            otherwise.

    Raises:
        PlatformMismatchError: If a concrete ``Path`` class is requested for
            a family other than the running one.
    """

    family: PlatformFamily

    def __init__(self, path_cls: type[PurePath] | None = None) -> None:
        if path_cls is None:
            path_cls = default_path_cls(self.family)
        elif issubclass(path_cls, Path) and self.family != CURRENT_FAMILY:
            raise PlatformMismatchError(
                f"Cannot build concrete {self.family} paths on a "
                f"{CURRENT_FAMILY} host; use {default_path_cls(self.family).__name__}"
            )
        self.path_cls = path_cls

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path_cls={self.path_cls.__name__})"

    def _resolve(self, chain: FallbackChain) -> PurePath:
        return self.path_cls(chain.resolve())

    def home_dir(self) -> PurePath:
        return self._resolve(self.base_chains()["home"])

    def temp_dir(self) -> PurePath:
        return self.path_cls(tempfile.gettempdir())

    @abstractmethod
    def base_chains(self) -> dict[str, FallbackChain]:
        ...

    @abstractmethod
    def settings_dir(self, identity: Identity) -> PurePath:
        ...

    @abstractmethod
    def saves_dir(self, identity: Identity) -> PurePath:
        ...

    @abstractmethod
    def logs_dir(self, identity: Identity) -> PurePath:
        ...
