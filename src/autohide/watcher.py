"""Filesystem notifications via watchdog, delivered over a blocking queue."""

from __future__ import annotations

import logging
import os
import queue
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Union

from watchdog.events import (
    EVENT_TYPE_CREATED,
    EVENT_TYPE_DELETED,
    EVENT_TYPE_MODIFIED,
    EVENT_TYPE_MOVED,
    FileSystemEvent,
    FileSystemEventHandler,
)
from watchdog.observers import Observer

from autohide import EventError, WatchError
from autohide.events import Create, Modify, Other, RawEvent, Remove, Rename, RenameMode

logger = logging.getLogger(__name__)

WatchItem = Union[RawEvent, EventError]

# Seconds between liveness checks of the observer and its emitters while idle
_POLL_INTERVAL = 1.0


def _event_paths(*raw: str | bytes) -> tuple[Path, ...]:
    return tuple(Path(os.fsdecode(p)) for p in raw if p)


def convert_event(event: FileSystemEvent) -> RawEvent:
    """Translate a watchdog event into a :data:`RawEvent`.

    Watchdog reports a rename inside the watched tree as one ``moved``
    event carrying both names.
    """
    src = event.src_path
    if event.event_type == EVENT_TYPE_CREATED:
        return Create(_event_paths(src))
    if event.event_type == EVENT_TYPE_MOVED:
        dest = getattr(event, "dest_path", "")
        if not dest:
            # Moved out of sight; only the old name is known
            return Rename(RenameMode.FROM, _event_paths(src))
        return Rename(RenameMode.BOTH, _event_paths(src, dest))
    if event.event_type == EVENT_TYPE_MODIFIED:
        return Modify(_event_paths(src))
    if event.event_type == EVENT_TYPE_DELETED:
        return Remove(_event_paths(src))
    return Other(_event_paths(src))


class _QueueHandler(FileSystemEventHandler):
    """Feed converted events into the one-way channel.

    Runs on the observer thread; nothing else is shared with it.
    """

    def __init__(self, channel: queue.Queue[WatchItem]) -> None:
        super().__init__()
        self._channel = channel

    def on_any_event(self, event: FileSystemEvent) -> None:
        try:
            self._channel.put(convert_event(event))
        except Exception as exc:
            self._channel.put(EventError(f"Failed to read event {event!r}: {exc}"))


class NotificationWatcher:
    """Watch a set of roots and hand out their events one at a time.

    Use as a context manager; the observer thread stops on exit.
    """

    def __init__(self, roots: Iterable[Path], recursive: bool = False) -> None:
        """Initialize the watcher.

        Args:
            roots: Directories to register.
            recursive: Whether to watch subdirectories as well.
        """
        self.roots = list(roots)
        self.recursive = recursive
        self._channel: queue.Queue[WatchItem] = queue.Queue()
        self._observer = Observer()

    def __enter__(self) -> NotificationWatcher:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def start(self) -> None:
        """Register every root and start the observer thread.

        Raises:
            WatchError: If a root cannot be registered or the observer
                fails to start.
        """
        handler = _QueueHandler(self._channel)
        for root in self.roots:
            try:
                self._observer.schedule(handler, str(root), recursive=self.recursive)
            except OSError as exc:
                raise WatchError(f"Failed to add directory to watch: {root}: {exc}") from exc
            logger.info("Watching %s%s", root, " (recursive)" if self.recursive else "")
        try:
            self._observer.start()
        except OSError as exc:
            raise WatchError(f"Failed to create watcher: {exc}") from exc

    def stop(self) -> None:
        if self._observer.is_alive():
            self._observer.stop()
            self._observer.join()

    def events(self) -> Iterator[WatchItem]:
        """Block for the next notification, forever.

        Queued events are drained before a dead channel is reported.

        Raises:
            WatchError: If the observer thread dies, or every emitter has
                stopped (a watched root was deleted or unmounted).
        """
        while True:
            try:
                yield self._channel.get(timeout=_POLL_INTERVAL)
            except queue.Empty:
                if not self._observer.is_alive():
                    raise WatchError("Critical error in watcher: notification channel closed")
                if not any(e.is_alive() for e in self._observer.emitters):
                    raise WatchError(
                        "Critical error in watcher: no watched directory is reachable"
                    )
