"""Lazy directory walker using os.scandir with an explicit stack (DFS)."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

logger = logging.getLogger(__name__)


def walk(root: Path, recursive: bool = False) -> Iterator[tuple[Path, OSError | None]]:
    """Yield entries below *root* in deterministic DFS order.

    The root itself is never yielded. Without *recursive* only its direct
    children are. With *recursive* a directory is yielded after everything
    beneath it, so the caller may rename it without breaking the walk.
    Symlinked directories are not descended into.

    Args:
        root: Directory to walk.
        recursive: Whether to descend into subdirectories.

    Yields:
        tuple[Path, OSError | None]: An entry path and ``None``, or the
        path that could not be read and the error.
    """
    # Stack items: (path, expanded). Expanded items are yielded as-is;
    # others are directories whose children still need listing.
    stack: list[tuple[Path, bool]] = [(root, False)]

    while stack:
        current, expanded = stack.pop()

        if expanded:
            yield current, None
            continue

        if current != root:
            # Parent comes out after its contents
            stack.append((current, True))

        try:
            with os.scandir(current) as it:
                raw_entries = sorted(it, key=lambda e: e.name)
        except OSError as exc:
            logger.debug("Cannot list: %s", current)
            yield current, exc
            continue

        children: list[tuple[Path, bool]] = []
        for dir_entry in raw_entries:
            path = Path(dir_entry.path)
            try:
                is_dir = dir_entry.is_dir(follow_symlinks=False)
            except OSError as exc:
                yield path, exc
                continue
            children.append((path, not (is_dir and recursive)))

        # Push children in reverse so first-alphabetical is popped first
        for child in reversed(children):
            stack.append(child)
