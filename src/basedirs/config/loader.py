"""Read an application identity for the basedirs CLI.

An optional TOML file supplies ``[identity]`` and ``[platform]`` tables;
command-line flags replace individual fields on top of it. Nothing is read
from the environment and no file is looked up implicitly.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from basedirs.config.schema import BaseDirsConfig
from basedirs.exceptions import ConfigError
from basedirs.util.logging import get_logger

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = get_logger(__name__)


def read_config_file(path: Path) -> dict[str, Any]:
    """Parse an identity TOML file.

    Raises:
        ConfigError: If the file is missing, unreadable or not valid TOML.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as exc:
        raise ConfigError(f"Config file not found: {path}") from exc
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc
    logger.debug("Read config file: %s", path)
    return data


def load_config(
    config_path: Path | None = None,
    *,
    identity: dict[str, str] | None = None,
    family: str | None = None,
) -> BaseDirsConfig:
    """Build the CLI configuration.

    Args:
        config_path: TOML file to start from. None starts from defaults.
        identity: Identity fields that replace the file's values.
        family: Platform family that replaces the file's value.

    Returns:
        Validated BaseDirsConfig instance.

    Raises:
        ConfigError: If the file cannot be read or a value is invalid.
    """
    data = read_config_file(config_path) if config_path is not None else {}
    file_identity = data.get("identity", {})
    file_platform = data.get("platform", {})
    if not isinstance(file_identity, dict) or not isinstance(file_platform, dict):
        raise ConfigError(f"[identity] and [platform] must be tables in {config_path}")

    sections = {
        "identity": {**file_identity, **(identity or {})},
        "platform": dict(file_platform),
    }
    if family is not None:
        sections["platform"]["family"] = family

    try:
        return BaseDirsConfig.model_validate(sections)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
