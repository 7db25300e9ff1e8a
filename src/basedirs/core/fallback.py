"""Ordered candidate sources for base-directory resolution.

A base root is resolved by trying each source in turn and taking the first
one that yields a value:

    environment variable -> value derived from home -> hard-coded constant

Sources are zero-argument callables evaluated lazily, so a derived default
(which may itself consult the environment) is only computed when every
earlier source came up empty.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass
from os import PathLike

Source = Callable[[], "str | PathLike[str] | None"]


def env_var(name: str) -> Source:
    """Source reading an environment variable. Empty values count as unset."""

    def _read() -> str | None:
        return os.environ.get(name) or None

    _read.__qualname__ = f"env_var({name!r})"
    return _read


def constant(value: str | PathLike[str]) -> Source:
    """Source that always yields ``value``."""

    def _read() -> str | PathLike[str]:
        return value

    _read.__qualname__ = f"constant({os.fspath(value)!r})"
    return _read


def derived(label: str, func: Callable[[], str | PathLike[str]]) -> Source:
    """Source computed on demand, e.g. from the home directory."""

    def _read() -> str | PathLike[str]:
        return func()

    _read.__qualname__ = f"derived({label!r})"
    return _read


@dataclass(frozen=True)
class FallbackChain:
    """An ordered, lazily evaluated list of candidate sources."""

    name: str
    sources: tuple[Source, ...]

    def resolve(self) -> str | PathLike[str]:
        """Return the first value that is not None.

        Raises:
            LookupError: If every source came up empty. Chains used for base
                roots always end in a total source, so this only signals a
                misconfigured chain.
        """
        for source in self.sources:
            value = source()
            if value is not None:
                return value
        raise LookupError(f"No source in chain {self.name!r} produced a value")

    def describe(self) -> list[str]:
        """Names of the sources in evaluation order."""
        return [source.__qualname__ for source in self.sources]
