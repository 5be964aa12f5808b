"""Discover image asset names declared in an asset catalog."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable

from .walker import is_hidden

logger = logging.getLogger(__name__)

IMAGESET_SUFFIX = ".imageset"


def collect_asset_names(
    catalog_root: str | Path,
    on_found: Callable[[str], None] | None = None,
) -> set[str]:
    """Return the names of every ``*.imageset`` directory under *catalog_root*.

    Names are taken from the directory name with the suffix stripped and are
    deduplicated by exact string match only, so ``Foo`` and ``foo`` both
    survive. Hidden entries are ignored and sub-directories that cannot be
    listed are skipped; an unreadable root simply yields an empty set.
    """
    names: set[str] = set()
    root = os.fspath(catalog_root)

    for current, dirs, _ in os.walk(root, onerror=_log_walk_error):
        dirs[:] = [d for d in dirs if not is_hidden(d)]
        for dirname in dirs:
            path = Path(current) / dirname
            if path.suffix != IMAGESET_SUFFIX:
                continue
            name = path.stem
            if name in names:
                continue
            names.add(name)
            if on_found is not None:
                on_found(name)

    return names


def _log_walk_error(exc: OSError) -> None:
    logger.debug("Skipping unreadable catalog path %s", exc.filename, exc_info=True)
