"""Windows directory layout.

    settings  %LOCALAPPDATA%\\company\\app\\settings
    saves     %USERPROFILE%\\Saved Games\\company\\app
    logs      %LOCALAPPDATA%\\company\\app\\logs
"""

from __future__ import annotations

from pathlib import PurePath

from basedirs.core.fallback import FallbackChain, constant, derived, env_var
from basedirs.core.joiners import app_path
from basedirs.platforms.base import StrategyBase
from basedirs.util.types import Identity, PlatformFamily

DEFAULT_LOCALAPPDATA = r"C:\Users\Default\AppData\Local"


class WindowsStrategy(StrategyBase):
    """Publisher/app layout under the local application-data root."""

    family: PlatformFamily = "windows"

    def base_chains(self) -> dict[str, FallbackChain]:
        return {
            "home": FallbackChain(
                "home",
                (env_var("USERPROFILE"), env_var("HOME"), constant("/")),
            ),
            "local_app_data": FallbackChain(
                "local_app_data",
                (env_var("LOCALAPPDATA"), constant(DEFAULT_LOCALAPPDATA)),
            ),
            # Approximates FOLDERID_SavedGames; the known-folder API is not
            # consulted, so a relocated Saved Games folder is not followed.
            "saved_games": FallbackChain(
                "saved_games",
                (
                    derived(
                        "home/Saved Games",
                        lambda: self.home_dir() / "Saved Games",
                    ),
                ),
            ),
        }

    def local_app_data_dir(self) -> PurePath:
        return self._resolve(self.base_chains()["local_app_data"])

    def saved_games_dir(self) -> PurePath:
        return self._resolve(self.base_chains()["saved_games"])

    def settings_dir(self, identity: Identity) -> PurePath:
        return app_path(
            self.local_app_data_dir(), identity.company, identity.app, "settings"
        )

    def saves_dir(self, identity: Identity) -> PurePath:
        return app_path(self.saved_games_dir(), identity.company, identity.app)

    def logs_dir(self, identity: Identity) -> PurePath:
        return app_path(
            self.local_app_data_dir(), identity.company, identity.app, "logs"
        )
