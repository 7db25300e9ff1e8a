"""Domain-specific exceptions for basedirs."""

from __future__ import annotations


class BaseDirsError(Exception):
    """Base exception for all basedirs errors."""


class DirectoryCreationError(BaseDirsError, OSError):
    """A directory could not be created.

    Carries the ``errno``, ``strerror`` and ``filename`` of the underlying
    OSError, so ``except OSError`` handlers see the original failure.
    """

    @classmethod
    def from_os_error(cls, exc: OSError) -> DirectoryCreationError:
        """Wrap an OSError raised by the filesystem."""
        if exc.errno is None:
            return cls(str(exc))
        if exc.filename is None:
            return cls(exc.errno, exc.strerror)
        return cls(exc.errno, exc.strerror, exc.filename)


class PlatformNotFoundError(BaseDirsError):
    """Requested platform family is not registered."""


class ConfigError(BaseDirsError):
    """Configuration loading or validation failed."""


class PlatformMismatchError(BaseDirsError):
    """Directories of a non-native platform family cannot be created here."""
