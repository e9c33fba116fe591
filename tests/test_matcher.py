"""Tests for autohide.matcher."""

from pathlib import Path

import pytest

from autohide import HideError
from autohide.matcher import EntryKind, MatchFilters, entry_kind, should_hide


class TestEntryKind:
    def test_file(self, tmp_path: Path) -> None:
        (tmp_path / "a.txt").write_text("a")
        assert entry_kind(tmp_path / "a.txt") is EntryKind.FILE

    def test_directory(self, tmp_path: Path) -> None:
        assert entry_kind(tmp_path) is EntryKind.DIRECTORY

    def test_missing_path_raises(self, tmp_path: Path) -> None:
        with pytest.raises(HideError, match="Failed to get metadata"):
            entry_kind(tmp_path / "gone")


class TestMatchFiltersBuild:
    def test_case_insensitive_folds_filters(self) -> None:
        f = MatchFilters.build(names=["Secret.TXT"], extensions=["LOG"])
        assert f.names == frozenset({"secret.txt"})
        assert f.extensions == frozenset({"log"})

    def test_case_sensitive_keeps_filters(self) -> None:
        f = MatchFilters.build(names=["Secret.TXT"], case_sensitive=True)
        assert f.names == frozenset({"Secret.TXT"})

    @pytest.mark.parametrize("ext", ["txt", ".txt"])
    def test_leading_dot_stripped_from_extensions(self, ext: str) -> None:
        assert MatchFilters.build(extensions=[ext]).extensions == frozenset({"txt"})

    def test_match_all_when_empty(self) -> None:
        assert MatchFilters.build().match_all is True
        assert MatchFilters.build(names=["a"]).match_all is False


class TestShouldHide:
    @pytest.mark.parametrize("kind", list(EntryKind))
    def test_empty_filters_match_everything(self, kind: EntryKind) -> None:
        f = MatchFilters.build(hide_files=False, hide_directories=False)
        assert should_hide(Path("anything"), kind, f) is True

    def test_file_name_case_sensitive(self) -> None:
        f = MatchFilters.build(names=["secret.txt"], case_sensitive=True)
        assert should_hide(Path("/d/secret.txt"), EntryKind.FILE, f) is True

    def test_file_name_case_insensitive(self) -> None:
        f = MatchFilters.build(names=["SECRET.TXT"], case_sensitive=False)
        assert should_hide(Path("/d/secret.txt"), EntryKind.FILE, f) is True

    def test_file_name_case_mismatch_falls_through_to_extension(self) -> None:
        f = MatchFilters.build(names=["SECRET.TXT"], case_sensitive=True)
        assert should_hide(Path("/d/secret.txt"), EntryKind.FILE, f) is False

    @pytest.mark.parametrize(
        ("name", "extensions", "case_sensitive", "expected"),
        [
            ("notes.txt", ["txt"], False, True),
            ("notes.TXT", ["txt"], False, True),
            ("notes.TXT", ["txt"], True, False),
            ("archive.tar.gz", ["gz"], True, True),
            ("archive.tar.gz", ["tar"], True, False),
            ("notes.md", ["txt"], False, False),
        ],
    )
    def test_file_extension(
        self,
        name: str,
        extensions: list[str],
        case_sensitive: bool,
        expected: bool,
    ) -> None:
        f = MatchFilters.build(extensions=extensions, case_sensitive=case_sensitive)
        assert should_hide(Path("/d") / name, EntryKind.FILE, f) is expected

    @pytest.mark.parametrize("name", ["README", ".bashrc"])
    def test_file_without_extension_is_error(self, name: str) -> None:
        f = MatchFilters.build(extensions=["txt"])
        with pytest.raises(HideError, match="extension"):
            should_hide(Path("/d") / name, EntryKind.FILE, f)

    def test_file_without_extension_matching_name(self) -> None:
        f = MatchFilters.build(names=["README"], extensions=["txt"])
        assert should_hide(Path("/d/README"), EntryKind.FILE, f) is True

    def test_directory_never_matches_extension(self) -> None:
        f = MatchFilters.build(extensions=["cache"])
        assert should_hide(Path("/d/cache"), EntryKind.DIRECTORY, f) is False

    def test_directory_name(self) -> None:
        f = MatchFilters.build(names=["Cache"])
        assert should_hide(Path("/d/cache"), EntryKind.DIRECTORY, f) is True

    def test_files_disabled(self) -> None:
        f = MatchFilters.build(names=["cache"], hide_files=False)
        assert should_hide(Path("/d/cache"), EntryKind.FILE, f) is False
        assert should_hide(Path("/d/cache"), EntryKind.DIRECTORY, f) is True

    def test_directories_disabled(self) -> None:
        f = MatchFilters.build(names=["cache"], hide_directories=False)
        assert should_hide(Path("/d/cache"), EntryKind.DIRECTORY, f) is False

    def test_other_kind_never_matches_filters(self) -> None:
        f = MatchFilters.build(names=["fifo"])
        assert should_hide(Path("/d/fifo"), EntryKind.OTHER, f) is False
