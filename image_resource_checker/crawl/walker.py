"""Directory traversal yielding project files filtered by extension."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator


class WalkError(Exception):
    """Raised when a directory required by a walk cannot be listed."""

    def __init__(self, path: str | Path, reason: OSError) -> None:
        super().__init__(f"Could not open directory {path}: {reason.strerror or reason}")
        self.path = Path(path)
        self.reason = reason


def file_extension(path: str | Path) -> str:
    """Return the lowercase extension of *path* without its leading dot."""
    return os.path.splitext(os.fspath(path))[1][1:].lower()


def is_hidden(name: str) -> bool:
    """Return ``True`` for dotfiles and dot-directories."""
    return name.startswith(".")


def walk_files(
    root: str | Path,
    extensions: Iterable[str] = (),
    recursive: bool = False,
) -> Iterator[Path]:
    """Yield regular files under *root* whose extension is in *extensions*.

    An empty *extensions* collection matches every file. Subdirectories are
    only entered when *recursive* is true. Hidden entries are skipped at every
    level. Entries come back in the order the platform lists them, which is
    not guaranteed to be sorted or stable across systems.

    Raises :class:`WalkError` as soon as a directory cannot be listed.
    """
    allowed = frozenset(extensions)
    yield from _walk(Path(root), allowed, recursive)


def _walk(directory: Path, allowed: frozenset[str], recursive: bool) -> Iterator[Path]:
    try:
        with os.scandir(directory) as iterator:
            entries = list(iterator)
    except OSError as exc:
        raise WalkError(directory, exc) from exc

    for entry in entries:
        if is_hidden(entry.name):
            continue
        if entry.is_dir():
            if recursive:
                yield from _walk(Path(entry.path), allowed, recursive)
        elif entry.is_file():
            if not allowed or file_extension(entry.name) in allowed:
                yield Path(entry.path)
