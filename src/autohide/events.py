"""Raw change notifications and the rule that picks out newly present paths.

Only an entry appearing under a name (created, or renamed into place) can
produce something new to hide. Modifications, removals and the old-name
half of a split rename never do.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from autohide import EventError


class RenameMode(enum.Enum):
    """Which side of a rename an event describes."""

    ANY = "any"
    TO = "to"
    FROM = "from"
    BOTH = "both"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class Create:
    paths: tuple[Path, ...]


@dataclass(frozen=True, slots=True)
class Rename:
    mode: RenameMode
    paths: tuple[Path, ...]


@dataclass(frozen=True, slots=True)
class Modify:
    paths: tuple[Path, ...]


@dataclass(frozen=True, slots=True)
class Remove:
    paths: tuple[Path, ...]


@dataclass(frozen=True, slots=True)
class Other:
    paths: tuple[Path, ...]


RawEvent = Union[Create, Rename, Modify, Remove, Other]


def relevant_path(event: RawEvent) -> Path | None:
    """Return the path an event brought into existence, if any.

    Args:
        event: A single raw notification.

    Returns:
        Path | None: The created path, or the destination of a rename.
        ``None`` for events that cannot introduce a new entry.

    Raises:
        EventError: If a relevant event carries no path.
    """
    if isinstance(event, Create):
        if not event.paths:
            raise EventError("No path in create event")
        return event.paths[0]

    if isinstance(event, Rename):
        if event.mode is RenameMode.FROM:
            return None
        # [old, new] or just [new]
        if len(event.paths) >= 2:
            return event.paths[1]
        if event.paths:
            return event.paths[0]
        raise EventError("No path in rename event")

    if isinstance(event, (Modify, Remove, Other)):
        return None

    raise EventError(f"Unknown event type: {type(event).__name__}")
