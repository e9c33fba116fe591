"""Decide whether a filesystem entry should be hidden."""

from __future__ import annotations

import enum
import os
import stat
from dataclasses import dataclass
from pathlib import Path

from autohide import HideError


class EntryKind(enum.Enum):
    """Kind of a filesystem entry at the time it was checked."""

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


def entry_kind(path: Path) -> EntryKind:
    """Stat *path* and classify it.

    Metadata is fetched fresh on every call; the entry may have changed
    since it was discovered.

    Raises:
        HideError: If the metadata cannot be read.
    """
    try:
        mode = os.stat(path).st_mode
    except OSError as exc:
        raise HideError(f"Failed to get metadata for path {path}: {exc}") from exc
    if stat.S_ISREG(mode):
        return EntryKind.FILE
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    return EntryKind.OTHER


def _fold(value: str, case_sensitive: bool) -> str:
    return value if case_sensitive else value.casefold()


@dataclass(frozen=True, slots=True)
class MatchFilters:
    """Name and extension filters plus the kinds they apply to.

    Attributes:
        names: Entry names to hide, already case-folded when matching is
            case-insensitive.
        extensions: File extensions to hide, without a leading dot and
            already case-folded when matching is case-insensitive.
        case_sensitive: Whether names and extensions compare exactly.
        hide_files: Whether regular files may be hidden.
        hide_directories: Whether directories may be hidden.
    """

    names: frozenset[str] = frozenset()
    extensions: frozenset[str] = frozenset()
    case_sensitive: bool = False
    hide_files: bool = True
    hide_directories: bool = True

    @classmethod
    def build(
        cls,
        names: list[str] | None = None,
        extensions: list[str] | None = None,
        case_sensitive: bool = False,
        hide_files: bool = True,
        hide_directories: bool = True,
    ) -> MatchFilters:
        """Normalize raw filter values once, at configuration time.

        Extensions may be given as ``txt`` or ``.txt``.
        """
        return cls(
            names=frozenset(_fold(n, case_sensitive) for n in names or ()),
            extensions=frozenset(
                _fold(x[1:] if x.startswith(".") else x, case_sensitive)
                for x in extensions or ()
            ),
            case_sensitive=case_sensitive,
            hide_files=hide_files,
            hide_directories=hide_directories,
        )

    @property
    def match_all(self) -> bool:
        return not self.names and not self.extensions


def _extension(path: Path) -> str:
    """Return the text after the last dot of the name.

    Raises:
        HideError: If the name has no extension (``README``, ``.bashrc``).
    """
    stem, dot, ext = path.name.rpartition(".")
    if not dot or not stem:
        raise HideError(f"Failed to get file extension from path {path}")
    return ext


def should_hide(path: Path, kind: EntryKind, filters: MatchFilters) -> bool:
    """Return whether *path* qualifies for hiding.

    Args:
        path: Entry path; only its final component is inspected.
        kind: Kind of the entry as observed just before the call.
        filters: Normalized filters.

    Returns:
        bool: ``True`` when the entry should be hidden.

    Raises:
        HideError: If a file matches no name and has no extension to
            compare, or the path has no final component.
    """
    if filters.match_all:
        return True

    if kind is EntryKind.FILE and filters.hide_files:
        if not path.name:
            raise HideError(f"Failed to get file name from path {path}")
        if _fold(path.name, filters.case_sensitive) in filters.names:
            return True
        return _fold(_extension(path), filters.case_sensitive) in filters.extensions

    if kind is EntryKind.DIRECTORY and filters.hide_directories:
        if not path.name:
            raise HideError(f"Failed to get directory name from path {path}")
        return _fold(path.name, filters.case_sensitive) in filters.names

    return False
