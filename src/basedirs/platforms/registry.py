"""Platform strategy factory and registration for basedirs.

The running platform's family is detected once, at import time, and stored
in ``CURRENT_FAMILY``. Call sites never inspect the OS themselves; they ask
the registry for a strategy and keep it.
"""

from __future__ import annotations

from collections.abc import Callable

from basedirs.exceptions import PlatformNotFoundError
from basedirs.platforms.base import CURRENT_FAMILY, PlatformStrategy, detect_family
from basedirs.util.logging import get_logger

__all__ = [
    "CURRENT_FAMILY",
    "detect_family",
    "get_platform",
    "list_platforms",
    "register_platform",
]

logger = get_logger(__name__)

_PLATFORM_REGISTRY: dict[str, Callable[[], PlatformStrategy]] = {}


def register_platform(name: str, factory: Callable[[], PlatformStrategy]) -> None:
    """Register a platform strategy factory.

    Args:
        name: Family name (e.g., 'unix').
        factory: Callable that returns a new PlatformStrategy instance.
    """
    _PLATFORM_REGISTRY[name] = factory
    logger.debug("Registered platform: %s", name)


def get_platform(name: str | None = None) -> PlatformStrategy:
    """Create a platform strategy instance by family name.

    Args:
        name: Family name. None or 'auto' selects CURRENT_FAMILY.

    Returns:
        A new PlatformStrategy instance. Families other than CURRENT_FAMILY
        build pure paths and cannot create directories.

    Raises:
        PlatformNotFoundError: If the family name is not registered.
    """
    family = CURRENT_FAMILY if name in (None, "auto") else name
    factory = _PLATFORM_REGISTRY.get(family)
    if factory is None:
        available = ", ".join(sorted(_PLATFORM_REGISTRY.keys())) or "(none)"
        raise PlatformNotFoundError(
            f"Platform {family!r} not found. Available: {available}"
        )
    return factory()


def list_platforms() -> list[str]:
    """Return names of all registered platform families."""
    return sorted(_PLATFORM_REGISTRY.keys())


def _register_builtins() -> None:
    """Register built-in platform families."""
    from basedirs.platforms.macos import MacStrategy
    from basedirs.platforms.unix import UnixStrategy
    from basedirs.platforms.windows import WindowsStrategy

    register_platform("windows", WindowsStrategy)
    register_platform("macos", MacStrategy)
    register_platform("unix", UnixStrategy)


_register_builtins()
