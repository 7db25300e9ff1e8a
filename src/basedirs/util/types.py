"""Shared type definitions for basedirs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Purpose = Literal["settings", "saves", "logs", "temp"]

PlatformFamily = Literal["windows", "macos", "unix"]

PURPOSES: tuple[Purpose, ...] = ("settings", "saves", "logs", "temp")


@dataclass(frozen=True)
class Identity:
    """Application identity used to build per-app directory segments.

    All fields are lowercased once at construction. No other validation is
    applied: empty strings are accepted and yield empty path segments.

    Attributes:
        company: Publisher name, used on Windows and Unix-like systems.
        app: Application name, used on Windows and Unix-like systems.
        bundle_id: Reverse-DNS identifier (e.g. "net.company_name.cool_app"),
            used on macOS only.
    """

    company: str
    app: str
    bundle_id: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "company", self.company.lower())
        object.__setattr__(self, "app", self.app.lower())
        object.__setattr__(self, "bundle_id", self.bundle_id.lower())
