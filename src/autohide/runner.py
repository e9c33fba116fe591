"""Wire configuration into the immediate pass and the watch loop."""

from __future__ import annotations

import logging
import stat
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from autohide import AutohideError, EventError, HideError
from autohide.breaker import ErrorWindow
from autohide.events import relevant_path
from autohide.hide import hide_path
from autohide.matcher import MatchFilters, entry_kind, should_hide
from autohide.scanner import walk
from autohide.watcher import NotificationWatcher, WatchItem

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Config:
    """Validated run configuration.

    Attributes:
        directories: Watch roots, each an existing directory.
        filters: Normalized match filters.
        recursive: Whether to include subdirectories.
        dry_run: Report matches instead of hiding them.
        watch: Run the continuous watch loop.
        immediate: Run the one-shot pass first.
    """

    directories: tuple[Path, ...]
    filters: MatchFilters
    recursive: bool = False
    dry_run: bool = False
    watch: bool = False
    immediate: bool = False


def _validate_directory(directory: str) -> Path:
    path = Path(directory)
    try:
        mode = path.stat().st_mode
    except FileNotFoundError as exc:
        raise AutohideError(f"Path {path} does not exist") from exc
    except OSError as exc:
        raise AutohideError(f"Failed to check if path {path} exists: {exc}") from exc
    if not stat.S_ISDIR(mode):
        raise AutohideError(f"Path {path} is not a directory")
    return path


def build_config(
    directories: list[str],
    filters: MatchFilters,
    recursive: bool = False,
    dry_run: bool = False,
    watch: bool = False,
    immediate: bool = False,
) -> Config:
    """Validate raw options into a :class:`Config`.

    Raises:
        AutohideError: If a directory is missing or not a directory, or
            neither mode is enabled.
    """
    if not watch and not immediate:
        raise AutohideError(
            "Both watch mode and immediate mode are disabled. "
            "At least one of these modes must be enabled."
        )
    if not directories:
        raise AutohideError("At least one directory is required")

    roots: list[Path] = []
    for directory in directories:
        root = _validate_directory(directory)
        if root not in roots:
            roots.append(root)

    return Config(
        directories=tuple(roots),
        filters=filters,
        recursive=recursive,
        dry_run=dry_run,
        watch=watch,
        immediate=immediate,
    )


def handle_path(path: Path, config: Config) -> bool:
    """Match a single entry and hide it, or report it in dry-run mode.

    Returns:
        bool: Whether the entry matched.

    Raises:
        HideError: If the entry cannot be evaluated or hidden.
    """
    kind = entry_kind(path)
    if not should_hide(path, kind, config.filters):
        logger.debug("Skipping %s", path)
        return False
    if config.dry_run:
        sys.stdout.write(f"Would hide: {path}\n")
    else:
        hidden = hide_path(path)
        if hidden == path:
            logger.info("Hid %s", path)
        else:
            logger.info("Hid %s as %s", path, hidden.name)
    return True


def run_immediate(config: Config) -> int:
    """Hide every currently matching entry under each root.

    Returns:
        int: Number of entries that failed.
    """
    failures = 0
    for root in config.directories:
        for path, error in walk(root, config.recursive):
            if error is not None:
                logger.error("Failed to read entry %s: %s", path, error)
                failures += 1
                continue
            try:
                handle_path(path, config)
            except HideError as exc:
                logger.error("%s", exc)
                failures += 1
    return failures


def _process(item: WatchItem, config: Config) -> None:
    if isinstance(item, EventError):
        raise item
    path = relevant_path(item)
    if path is None:
        return
    handle_path(path, config)


def run_watch(
    config: Config,
    source: Iterable[WatchItem] | None = None,
    breaker: ErrorWindow | None = None,
) -> None:
    """Hide matching entries as they appear, until a fatal error.

    Args:
        config: Run configuration.
        source: Event stream; defaults to a :class:`NotificationWatcher`
            over ``config.directories``.
        breaker: Error guard; a fresh one per call by default.

    Raises:
        WatchError: If the watcher fails or the breaker trips.
    """
    if breaker is None:
        breaker = ErrorWindow()

    if source is not None:
        _watch_loop(source, config, breaker)
        return

    with NotificationWatcher(config.directories, config.recursive) as watcher:
        _watch_loop(watcher.events(), config, breaker)


def _watch_loop(source: Iterable[WatchItem], config: Config, breaker: ErrorWindow) -> None:
    for item in source:
        try:
            _process(item, config)
        except (HideError, EventError) as exc:
            logger.error("%s", exc)
            breaker.record()
        breaker.check()
