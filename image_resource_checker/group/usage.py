"""Count how many project files reference a normalized asset identifier."""

from __future__ import annotations

import codecs
import logging
from pathlib import Path
from typing import Callable, Iterable

from ..crawl.walker import walk_files

logger = logging.getLogger(__name__)

MEMBER_ACCESS_PREFIX = "."


def reference_pattern(identifier: str) -> str:
    """Return the literal text that marks a reference to *identifier*."""
    return f"{MEMBER_ACCESS_PREFIX}{identifier}"


def detect_encoding(data: bytes) -> str:
    """Return ``utf-16`` for data starting with a UTF-16 BOM, else ``utf-8-sig``."""
    if data.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        return "utf-16"
    return "utf-8-sig"


def read_text(path: Path) -> str | None:
    """Return the text content of *path*, or ``None`` when it is not readable text.

    UTF-8 is assumed unless the file starts with a UTF-16 byte order mark, as
    Xcode ``.strings`` files often do.
    """
    try:
        data = path.read_bytes()
        return data.decode(detect_encoding(data))
    except (OSError, UnicodeDecodeError):
        logger.debug("Skipping unreadable file %s", path, exc_info=True)
        return None


def count_occurrences(
    identifier: str,
    project_root: str | Path,
    extensions: Iterable[str] = (),
    on_match: Callable[[Path], None] | None = None,
) -> int:
    """Return the number of files under *project_root* that reference *identifier*.

    Each file contributes at most one, however often the pattern repeats in it.
    Files that cannot be decoded are skipped; a directory that cannot be
    listed raises :class:`~image_resource_checker.crawl.walker.WalkError`.
    """
    pattern = reference_pattern(identifier)
    found = 0
    for path in walk_files(project_root, extensions, recursive=True):
        content = read_text(path)
        if content is None or pattern not in content:
            continue
        found += 1
        if on_match is not None:
            on_match(path)
    return found
