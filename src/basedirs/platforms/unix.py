"""XDG Base Directory layout for Linux and other Unix-like systems.

    settings  $XDG_CONFIG_HOME/company/app        (~/.config)
    saves     $XDG_DATA_HOME/company/app/saves    (~/.local/share)
    logs      $XDG_STATE_HOME/company/app/logs    (~/.local/state)

Config home is settings-scoped already, so settings carry no suffix.
"""

from __future__ import annotations

from pathlib import PurePath

from basedirs.core.fallback import FallbackChain, constant, derived, env_var
from basedirs.core.joiners import app_path
from basedirs.platforms.base import StrategyBase
from basedirs.util.types import Identity, PlatformFamily


class UnixStrategy(StrategyBase):
    """Publisher/app layout under the XDG base directories."""

    family: PlatformFamily = "unix"

    def base_chains(self) -> dict[str, FallbackChain]:
        return {
            "home": FallbackChain("home", (env_var("HOME"), constant("/"))),
            "config_home": FallbackChain(
                "config_home",
                (
                    env_var("XDG_CONFIG_HOME"),
                    derived("home/.config", lambda: self.home_dir() / ".config"),
                ),
            ),
            "data_home": FallbackChain(
                "data_home",
                (
                    env_var("XDG_DATA_HOME"),
                    derived(
                        "home/.local/share",
                        lambda: self.home_dir() / ".local" / "share",
                    ),
                ),
            ),
            "state_home": FallbackChain(
                "state_home",
                (
                    env_var("XDG_STATE_HOME"),
                    derived(
                        "home/.local/state",
                        lambda: self.home_dir() / ".local" / "state",
                    ),
                ),
            ),
        }

    def config_home(self) -> PurePath:
        return self._resolve(self.base_chains()["config_home"])

    def data_home(self) -> PurePath:
        return self._resolve(self.base_chains()["data_home"])

    def state_home(self) -> PurePath:
        return self._resolve(self.base_chains()["state_home"])

    def settings_dir(self, identity: Identity) -> PurePath:
        return app_path(self.config_home(), identity.company, identity.app)

    def saves_dir(self, identity: Identity) -> PurePath:
        return app_path(self.data_home(), identity.company, identity.app, "saves")

    def logs_dir(self, identity: Identity) -> PurePath:
        return app_path(self.state_home(), identity.company, identity.app, "logs")
