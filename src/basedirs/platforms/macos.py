"""macOS directory layout, keyed by bundle identifier.

    settings  ~/Library/Application Support/<bundle_id>/settings
    saves     ~/Library/Application Support/<bundle_id>/saves
    logs      ~/Library/Logs/<bundle_id>
"""

from __future__ import annotations

from pathlib import PurePath

from basedirs.core.fallback import FallbackChain, constant, derived, env_var
from basedirs.core.joiners import bundle_path
from basedirs.platforms.base import StrategyBase
from basedirs.util.types import Identity, PlatformFamily


class MacStrategy(StrategyBase):
    """Bundle-id layout under ~/Library. Only HOME is consulted."""

    family: PlatformFamily = "macos"

    def base_chains(self) -> dict[str, FallbackChain]:
        return {
            "home": FallbackChain("home", (env_var("HOME"), constant("/"))),
            "app_support": FallbackChain(
                "app_support",
                (
                    derived(
                        "home/Library/Application Support",
                        lambda: self.home_dir() / "Library" / "Application Support",
                    ),
                ),
            ),
            "logs": FallbackChain(
                "logs",
                (
                    derived(
                        "home/Library/Logs",
                        lambda: self.home_dir() / "Library" / "Logs",
                    ),
                ),
            ),
        }

    def app_support_dir(self) -> PurePath:
        return self._resolve(self.base_chains()["app_support"])

    def logs_root_dir(self) -> PurePath:
        return self._resolve(self.base_chains()["logs"])

    def settings_dir(self, identity: Identity) -> PurePath:
        return bundle_path(self.app_support_dir(), identity.bundle_id, "settings")

    def saves_dir(self, identity: Identity) -> PurePath:
        return bundle_path(self.app_support_dir(), identity.bundle_id, "saves")

    def logs_dir(self, identity: Identity) -> PurePath:
        return bundle_path(self.logs_root_dir(), identity.bundle_id)
