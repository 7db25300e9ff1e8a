"""Pydantic v2 configuration models for basedirs."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class IdentityConfig(BaseModel):
    """Application identity. Values are lowercased when resolved."""

    company: str = Field(default="", description="Publisher name")
    app: str = Field(default="", description="Application name")
    bundle_id: str = Field(
        default="",
        description="Reverse-DNS bundle identifier, used on macOS",
    )


class PlatformConfig(BaseModel):
    """Platform family selection, made once at startup."""

    family: Literal["auto", "windows", "macos", "unix"] = Field(
        default="auto",
        description="'auto' selects the family of the running OS",
    )


class BaseDirsConfig(BaseModel):
    """Root configuration model.

    All sections are optional with sensible defaults.
    A completely empty TOML file produces a valid config.
    """

    identity: IdentityConfig = Field(default_factory=IdentityConfig)
    platform: PlatformConfig = Field(default_factory=PlatformConfig)
