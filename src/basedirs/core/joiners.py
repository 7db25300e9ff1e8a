"""Compose a base root with identity segments.

Each segment is appended with the ``/`` operator of the base's path class,
never by string concatenation. Forbidden characters are not sanitized.
"""

from __future__ import annotations

from pathlib import PurePath
from typing import TypeVar

P = TypeVar("P", bound=PurePath)


def app_path(base: P, company: str, app: str, suffix: str | None = None) -> P:
    """Build ``base/company/app[/suffix]``."""
    path = base / company / app
    if suffix is not None:
        path = path / suffix
    return path


def bundle_path(base: P, bundle_id: str, suffix: str | None = None) -> P:
    """Build ``base/bundle_id[/suffix]``."""
    path = base / bundle_id
    if suffix is not None:
        path = path / suffix
    return path
