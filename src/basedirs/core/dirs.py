"""Purpose-based application directories.

``BaseDirs`` holds an application identity and resolves the settings, saves,
logs and temp directories for it on the selected platform family. Query
methods are pure; only the ``ensure_*`` family touches the filesystem, and
only to create missing directories.

Example:
    dirs = BaseDirs("MyCo", "CoolApp", "net.myco.coolapp")
    config_file = dirs.settings_path("config.toml")
    dirs.ensure_parent_dir(config_file)
"""

from __future__ import annotations

import os
from pathlib import Path, PurePath

from basedirs.config.schema import BaseDirsConfig
from basedirs.exceptions import DirectoryCreationError, PlatformMismatchError
from basedirs.platforms.base import CURRENT_FAMILY, PlatformStrategy
from basedirs.platforms.registry import get_platform
from basedirs.util.logging import get_logger
from basedirs.util.types import Identity, Purpose

logger = get_logger(__name__)

# Selected once per process; every BaseDirs built without an explicit
# strategy shares it.
PROCESS_STRATEGY: PlatformStrategy = get_platform()


def home() -> PurePath:
    """Return the user's home directory for the running platform.

    Falls back to the filesystem root when no home variable is set, so the
    result is never empty.
    """
    return PROCESS_STRATEGY.home_dir()


def ensure_dir(path: str | os.PathLike[str]) -> Path:
    """Create ``path`` and any missing ancestors, then return it.

    Already-existing directories are left alone, so concurrent callers
    creating the same tree all succeed.

    Raises:
        DirectoryCreationError: If the directory cannot be created. It is an
            OSError carrying the original errno, strerror and filename.
    """
    directory = Path(path)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreationError.from_os_error(exc) from exc
    logger.debug("Ensured directory: %s", directory)
    return directory


class BaseDirs:
    """Directory resolver bound to one identity and one platform family.

    Args:
        company: Publisher name. Lowercased.
        app: Application name. Lowercased.
        bundle_id: Reverse-DNS bundle identifier. Lowercased.
        strategy: Platform strategy. Defaults to the process-wide one
            selected for the running OS.
    """

    def __init__(
        self,
        company: str,
        app: str,
        bundle_id: str,
        *,
        strategy: PlatformStrategy | None = None,
    ) -> None:
        self._identity = Identity(company, app, bundle_id)
        self._strategy = strategy if strategy is not None else PROCESS_STRATEGY

    @classmethod
    def from_config(cls, config: BaseDirsConfig) -> BaseDirs:
        """Build a resolver from a loaded configuration."""
        strategy = get_platform(config.platform.family)
        logger.debug("Using platform family: %s", strategy.family)
        return cls(
            config.identity.company,
            config.identity.app,
            config.identity.bundle_id,
            strategy=strategy,
        )

    def __repr__(self) -> str:
        return (
            f"BaseDirs(company={self.company!r}, app={self.app!r}, "
            f"bundle_id={self.bundle_id!r}, platform={self.platform!r})"
        )

    @property
    def identity(self) -> Identity:
        return self._identity

    @property
    def company(self) -> str:
        return self._identity.company

    @property
    def app(self) -> str:
        return self._identity.app

    @property
    def bundle_id(self) -> str:
        return self._identity.bundle_id

    @property
    def strategy(self) -> PlatformStrategy:
        return self._strategy

    @property
    def platform(self) -> str:
        """Family name of the bound strategy."""
        return self._strategy.family

    # ---- purpose directories ----

    def settings_dir(self) -> PurePath:
        """Device-local settings."""
        return self._strategy.settings_dir(self._identity)

    def saves_dir(self) -> PurePath:
        """Save data, expected to be synced or backed up."""
        return self._strategy.saves_dir(self._identity)

    def logs_dir(self) -> PurePath:
        """Logs and debug output, not synced."""
        return self._strategy.logs_dir(self._identity)

    def temp_dir(self) -> PurePath:
        """Short-lived files; may be cleared on reboot. Not identity-scoped."""
        return self._strategy.temp_dir()

    def dirs(self) -> dict[Purpose, PurePath]:
        """All purpose directories, keyed by purpose."""
        return {
            "settings": self.settings_dir(),
            "saves": self.saves_dir(),
            "logs": self.logs_dir(),
            "temp": self.temp_dir(),
        }

    # ---- file paths ----

    def settings_path(self, name: str) -> PurePath:
        return self.settings_dir() / name

    def saves_path(self, name: str) -> PurePath:
        return self.saves_dir() / name

    def logs_path(self, name: str) -> PurePath:
        return self.logs_dir() / name

    def temp_path(self, name: str) -> PurePath:
        return self.temp_dir() / name

    # ---- directory creation ----

    def _ensure(self, directory: PurePath) -> Path:
        if not isinstance(directory, Path):
            raise PlatformMismatchError(
                f"Cannot create {self.platform} directory {directory} "
                f"on a {CURRENT_FAMILY} host"
            )
        return ensure_dir(directory)

    def ensure_settings_dir(self) -> Path:
        return self._ensure(self.settings_dir())

    def ensure_saves_dir(self) -> Path:
        return self._ensure(self.saves_dir())

    def ensure_logs_dir(self) -> Path:
        return self._ensure(self.logs_dir())

    def ensure_parent_dir(self, path: str | os.PathLike[str]) -> None:
        """Create every missing ancestor of ``path``. ``path`` itself is not
        created. Does nothing when ``path`` has no parent component.

        Raises:
            DirectoryCreationError: If a directory cannot be created.
        """
        target = Path(path)
        parent = target.parent
        if parent == target or not parent.parts:
            return
        ensure_dir(parent)
