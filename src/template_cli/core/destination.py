"""Destination resolution and the current-directory safety gate."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from template_cli.errors import EmptyNameError, InvalidCharacterError, PathExistsError

logger = logging.getLogger(__name__)

CURRENT_DIRECTORY_ALIASES: frozenset[str] = frozenset({".", "./"})

_INVALID_CHARS = re.compile(r"[^a-zA-Z0-9._/-]")


@dataclass(frozen=True)
class CurrentDirectory:
    """The project is materialized into the directory the tool runs in."""

    def path(self, root: Path) -> Path:
        return root

    @property
    def label(self) -> str:
        return "current directory"


@dataclass(frozen=True)
class NamedDirectory:
    """The project is materialized into a new directory, relative to the working directory."""

    name: str

    def path(self, root: Path) -> Path:
        return root / self.name

    @property
    def label(self) -> str:
        return f'"{self.name}"'


ResolvedDestination = CurrentDirectory | NamedDirectory


def resolve_destination(raw: str, root: Path | None = None) -> ResolvedDestination:
    """
    Turn raw user input into a destination.

    ``.`` and ``./`` select the current directory without further checks.
    Anything else must only use ``[a-zA-Z0-9._/-]`` and must not exist yet.

    Raises:
        EmptyNameError: The input is blank.
        InvalidCharacterError: The input contains a disallowed character.
        PathExistsError: Something already exists at the input path.
    """
    base = Path.cwd() if root is None else root
    name = raw.strip()

    if not name:
        raise EmptyNameError(raw)

    if name in CURRENT_DIRECTORY_ALIASES:
        return CurrentDirectory()

    invalid = "".join(dict.fromkeys(_INVALID_CHARS.findall(name)))
    if invalid:
        raise InvalidCharacterError(name, invalid)

    target = base / name
    if os.path.lexists(target):
        raise PathExistsError(name)

    return NamedDirectory(name)


def visible_entries(root: Path) -> list[str]:
    """Names directly under ``root`` that do not start with a dot, sorted."""
    return sorted(entry.name for entry in root.iterdir() if not entry.name.startswith("."))


def passes_safety_gate(
    destination: ResolvedDestination,
    root: Path,
    confirm: Callable[[list[str]], bool],
) -> bool:
    """
    Return whether materialization may proceed into ``destination``.

    A non-empty current directory needs ``confirm`` to return ``True``; hidden
    entries do not count. Named directories always pass.
    """
    if not isinstance(destination, CurrentDirectory):
        return True

    entries = visible_entries(root)
    if not entries:
        return True

    logger.debug("current directory %s has %d visible entries", root, len(entries))
    return confirm(entries)
