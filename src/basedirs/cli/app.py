"""Root CLI application for basedirs."""

from __future__ import annotations

import enum
from pathlib import Path
from typing import Optional

import typer

from basedirs.cli.formatters import (
    console,
    dirs_table,
    output_console,
    print_error,
    print_path,
    print_success,
)
from basedirs.config.loader import load_config
from basedirs.core.dirs import BaseDirs, home
from basedirs.exceptions import BaseDirsError
from basedirs.platforms.registry import CURRENT_FAMILY, list_platforms
from basedirs.util.logging import setup_logging

app = typer.Typer(
    name="basedirs",
    help="Show and create per-application settings, saves, logs and temp directories.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


class PurposeChoice(str, enum.Enum):
    settings = "settings"
    saves = "saves"
    logs = "logs"
    temp = "temp"


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v for INFO, -vv for DEBUG)",
    ),
    company: Optional[str] = typer.Option(None, "--company", help="Publisher name"),
    app_name: Optional[str] = typer.Option(None, "--app", help="Application name"),
    bundle_id: Optional[str] = typer.Option(
        None, "--bundle-id", help="Reverse-DNS bundle identifier (macOS)"
    ),
    platform: Optional[str] = typer.Option(
        None,
        "--platform",
        help="Platform family: auto, windows, macos or unix",
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", help="TOML file with [identity] and [platform] tables"
    ),
) -> None:
    """Show and create per-application settings, saves, logs and temp directories."""
    setup_logging(verbose)
    identity = {
        key: value
        for key, value in (
            ("company", company),
            ("app", app_name),
            ("bundle_id", bundle_id),
        )
        if value is not None
    }
    ctx.obj = {"identity": identity, "family": platform, "config_path": config}


def _build_dirs(ctx: typer.Context) -> BaseDirs:
    """Resolve config layers and build the BaseDirs for this invocation."""
    obj = ctx.obj or {}
    try:
        config = load_config(
            obj.get("config_path"),
            identity=obj.get("identity"),
            family=obj.get("family"),
        )
        return BaseDirs.from_config(config)
    except BaseDirsError as exc:
        print_error(str(exc))
        raise typer.Exit(code=1) from exc


@app.command("show")
def show_command(ctx: typer.Context) -> None:
    """Show every purpose directory for the configured identity."""
    dirs = _build_dirs(ctx)
    output_console.print(dirs_table(f"{dirs.platform} directories", dirs.dirs()))


@app.command("home")
def home_command(ctx: typer.Context) -> None:
    """Print the resolved home directory."""
    obj = ctx.obj or {}
    if obj.get("family") is not None:
        print_path(_build_dirs(ctx).strategy.home_dir())
    else:
        print_path(home())


@app.command("path")
def path_command(
    ctx: typer.Context,
    purpose: PurposeChoice = typer.Argument(..., help="Directory purpose"),
    name: str = typer.Argument(..., help="File name to join"),
) -> None:
    """Print a file path inside a purpose directory. Creates nothing."""
    dirs = _build_dirs(ctx)
    builders = {
        PurposeChoice.settings: dirs.settings_path,
        PurposeChoice.saves: dirs.saves_path,
        PurposeChoice.logs: dirs.logs_path,
        PurposeChoice.temp: dirs.temp_path,
    }
    print_path(builders[purpose](name))


@app.command("ensure")
def ensure_command(ctx: typer.Context) -> None:
    """Create the settings, saves and logs directories if missing."""
    dirs = _build_dirs(ctx)
    try:
        created = [
            dirs.ensure_settings_dir(),
            dirs.ensure_saves_dir(),
            dirs.ensure_logs_dir(),
        ]
    except BaseDirsError as exc:
        print_error(str(exc))
        raise typer.Exit(code=1) from exc
    for path in created:
        print_success(str(path))


@app.command("platforms")
def platforms_command() -> None:
    """List registered platform families."""
    for name in list_platforms():
        marker = " (current)" if name == CURRENT_FAMILY else ""
        print_path(f"{name}{marker}")


def main() -> None:
    """Entry point for the basedirs CLI."""
    try:
        app()
    except BaseDirsError as exc:
        print_error(str(exc))
        raise typer.Exit(code=1) from exc
    except KeyboardInterrupt:
        console.print("\n[dim]Interrupted.[/dim]")
        raise typer.Exit(code=130) from None
