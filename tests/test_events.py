"""Tests for autohide.events."""

from pathlib import Path

import pytest

from autohide import EventError
from autohide.events import (
    Create,
    Modify,
    Other,
    Remove,
    Rename,
    RenameMode,
    relevant_path,
)

OLD = Path("/w/old.txt")
NEW = Path("/w/new.txt")


class TestRelevantPath:
    def test_create(self) -> None:
        assert relevant_path(Create((NEW,))) == NEW

    def test_rename_with_both_paths_yields_destination(self) -> None:
        assert relevant_path(Rename(RenameMode.BOTH, (OLD, NEW))) == NEW

    @pytest.mark.parametrize("mode", [RenameMode.TO, RenameMode.ANY, RenameMode.OTHER])
    def test_rename_with_single_path(self, mode: RenameMode) -> None:
        assert relevant_path(Rename(mode, (NEW,))) == NEW

    def test_rename_from_half_is_ignored(self) -> None:
        assert relevant_path(Rename(RenameMode.FROM, (OLD,))) is None

    @pytest.mark.parametrize("event", [Modify((NEW,)), Remove((NEW,)), Other((NEW,))])
    def test_other_kinds_are_ignored(self, event) -> None:
        assert relevant_path(event) is None

    @pytest.mark.parametrize(
        "event",
        [Create(()), Rename(RenameMode.BOTH, ()), Rename(RenameMode.TO, ())],
    )
    def test_missing_path_is_error(self, event) -> None:
        with pytest.raises(EventError, match="No path"):
            relevant_path(event)

    def test_rename_from_without_paths_is_not_error(self) -> None:
        assert relevant_path(Rename(RenameMode.FROM, ())) is None
