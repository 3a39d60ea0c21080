"""Tests for the day edit draft and its file reconciliation."""

import pytest

from worklog.domain.draft import LogDraft, group_files, synthesize_file_project_map
from worklog.domain.entities import DayLog
from worklog.domain.errors import DuplicateFileError, NotFoundError, ValidationError


class TestSynthesizeFileProjectMap:
    """Tests for deriving assignments of legacy entries."""

    def test_no_projects(self):
        """Without projects nothing is assigned."""
        assert synthesize_file_project_map(["a.sql"], []) == {}

    def test_single_project_takes_all(self):
        """One project receives every file."""
        assert synthesize_file_project_map(["a.sql", "b.js"], ["CMPC"]) == {
            "a.sql": "CMPC",
            "b.js": "CMPC",
        }

    def test_positional_with_overflow(self):
        """Files pair with projects by position; extras go to the last project."""
        mapping = synthesize_file_project_map(["a", "b", "c", "d"], ["P1", "P2"])
        assert mapping == {"a": "P1", "b": "P2", "c": "P2", "d": "P2"}

    def test_more_projects_than_files(self):
        """Unused projects are simply left out."""
        assert synthesize_file_project_map(["a"], ["P1", "P2", "P3"]) == {"a": "P1"}


class TestOpen:
    """Tests for opening drafts."""

    def test_open_without_log(self):
        """A date with no entry opens an empty draft."""
        draft = LogDraft.open("2026-10-19")
        assert draft.is_empty
        assert draft.default_project is None
        assert draft.file_project_map == {}

    def test_open_stored_log(self):
        """Stored fields are copied; the default project is the last selected."""
        log = DayLog(
            date="2026-10-19",
            user_id="ana",
            projects=("CMPC", "Tekno"),
            description="Trabalho",
            files="a.sql,b.js",
            file_project_map={"a.sql": "CMPC", "b.js": "Tekno"},
            file_category_map={"a.sql": "mii"},
        )
        draft = LogDraft.open(log.date, log)

        assert draft.projects == ["CMPC", "Tekno"]
        assert draft.files == ["a.sql", "b.js"]
        assert draft.default_project == "Tekno"
        assert draft.file_project_map == {"a.sql": "CMPC", "b.js": "Tekno"}
        assert draft.file_category_map == {"a.sql": "mii"}

    def test_open_legacy_log_synthesizes_map(self, legacy_log):
        """Entries saved without a map get one derived from the projects."""
        draft = LogDraft.open(legacy_log.date, legacy_log)
        assert draft.file_project_map == {"a.sql": "CMPC", "b.js": "Tekno", "c.trx": "Tekno"}

    def test_open_keeps_empty_map(self):
        """A stored empty map is not replaced by a synthesized one."""
        log = DayLog(
            date="2026-10-19",
            user_id="ana",
            projects=("CMPC",),
            files="a.sql",
            file_project_map={},
        )
        assert LogDraft.open(log.date, log).file_project_map == {}

    def test_draft_is_detached(self):
        """Editing the draft does not touch the stored log's maps."""
        stored_map = {"a.sql": "CMPC"}
        log = DayLog(
            date="2026-10-19",
            user_id="ana",
            projects=("CMPC",),
            files="a.sql",
            file_project_map=stored_map,
        )
        draft = LogDraft.open(log.date, log)
        draft.assign_project("a.sql", "Tekno")
        assert stored_map == {"a.sql": "CMPC"}


class TestProjects:
    """Tests for project selection."""

    def test_toggle_selects_and_deselects(self):
        """Toggling adds then removes, repinning the default project."""
        draft = LogDraft.open("2026-10-19")
        assert draft.toggle_project("CMPC") is True
        assert draft.default_project == "CMPC"
        assert draft.toggle_project("Tekno") is True
        assert draft.default_project == "CMPC"

        assert draft.toggle_project("CMPC") is False
        assert draft.projects == ["Tekno"]
        assert draft.default_project == "Tekno"

        draft.toggle_project("Tekno")
        assert draft.default_project is None

    def test_deselect_keeps_file_assignment(self):
        """Files keep pointing at a project after it is deselected."""
        draft = LogDraft.open("2026-10-19")
        draft.toggle_project("CMPC")
        draft.add_file("a.sql")
        draft.toggle_project("CMPC")

        assert draft.projects == []
        assert draft.file_project_map["a.sql"] == "CMPC"
        assert draft.to_log("ana").file_project_map == {"a.sql": "CMPC"}

    def test_set_projects_dedups_in_order(self):
        """Selection keeps the first occurrence of each name."""
        draft = LogDraft.open("2026-10-19")
        draft.set_projects(["Tekno", " CMPC ", "Tekno", ""])
        assert draft.projects == ["Tekno", "CMPC"]
        assert draft.default_project == "CMPC"

    def test_set_default_project(self):
        """Only a selected project can be the default."""
        draft = LogDraft.open("2026-10-19")
        draft.set_projects(["CMPC", "Tekno"])
        draft.set_default_project("CMPC")
        assert draft.default_project == "CMPC"

        with pytest.raises(ValidationError, match="not selected"):
            draft.set_default_project("Melitta")


class TestFiles:
    """Tests for adding, removing and assigning files."""

    def test_add_file_uses_default_project(self):
        """New files go to the default project."""
        draft = LogDraft.open("2026-10-19")
        draft.set_projects(["CMPC", "Tekno"])
        assert draft.add_file("  a.sql ") == "Tekno"
        assert draft.files == ["a.sql"]
        assert draft.file_project_map == {"a.sql": "Tekno"}

    def test_add_file_without_projects(self):
        """With nothing selected the file stays unassigned."""
        draft = LogDraft.open("2026-10-19")
        assert draft.add_file("a.sql") is None
        assert "a.sql" not in draft.file_project_map

    def test_add_blank_file_rejected(self):
        """Blank names are rejected."""
        draft = LogDraft.open("2026-10-19")
        with pytest.raises(ValidationError):
            draft.add_file("   ")

    def test_add_duplicate_file_rejected(self):
        """A file can appear only once per day."""
        draft = LogDraft.open("2026-10-19")
        draft.add_file("a.sql")
        with pytest.raises(DuplicateFileError) as exc_info:
            draft.add_file("a.sql")
        assert exc_info.value.file_name == "a.sql"
        assert draft.files == ["a.sql"]

    def test_remove_file_keeps_map_entries(self):
        """Removing a file leaves its assignment and override behind."""
        draft = LogDraft.open("2026-10-19")
        draft.set_projects(["CMPC"])
        draft.add_file("a.sql")
        draft.assign_category("a.sql", "mii")
        draft.remove_file("a.sql")

        assert draft.files == []
        assert draft.file_project_map == {"a.sql": "CMPC"}
        assert draft.file_category_map == {"a.sql": "mii"}

    def test_remove_unknown_file(self):
        """Removing a file that isn't listed is an error."""
        draft = LogDraft.open("2026-10-19")
        with pytest.raises(NotFoundError):
            draft.remove_file("missing.sql")

    def test_category_override(self):
        """Category overrides replace the extension category."""
        draft = LogDraft.open("2026-10-19")
        draft.add_file("a.sql")
        assert draft.category_of("a.sql") == "procedures"
        draft.assign_category("a.sql", "mii")
        assert draft.category_of("a.sql") == "mii"


class TestGroupFiles:
    """Tests for grouping files by project and category."""

    def test_group_files(self):
        """Groups follow file order, unassigned files go under None."""
        groups = group_files(
            ["a.sql", "b.js", "c.trx", "d.txt"],
            {"a.sql": "CMPC", "b.js": "Tekno", "c.trx": "CMPC"},
            {"c.trx": "procedures"},
        )
        assert groups == {
            "CMPC": {"procedures": ["a.sql", "c.trx"]},
            "Tekno": {"web-application": ["b.js"]},
            None: {"outros": ["d.txt"]},
        }

    def test_group_files_without_map(self):
        """A missing map leaves every file unassigned."""
        assert group_files(["a.sql"], None, None) == {None: {"procedures": ["a.sql"]}}


class TestToLog:
    """Tests for building the stored record."""

    def test_is_empty(self):
        """Whitespace-only descriptions count as empty."""
        draft = LogDraft(date="2026-10-19", description="   ")
        assert draft.is_empty
        draft.projects.append("CMPC")
        assert not draft.is_empty

    def test_to_log(self):
        """The record carries joined files and trimmed description."""
        draft = LogDraft.open("2026-10-19")
        draft.set_projects(["CMPC"])
        draft.description = "  Ajustes  "
        draft.add_file("a.sql")
        draft.add_file("b.js")

        log = draft.to_log("ana")
        assert log.user_id == "ana"
        assert log.projects == ("CMPC",)
        assert log.description == "Ajustes"
        assert log.files == "a.sql,b.js"
        assert log.file_project_map == {"a.sql": "CMPC", "b.js": "CMPC"}
        assert log.file_category_map == {}
