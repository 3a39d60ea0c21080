"""Tests for DayLogService."""

import pytest

from worklog.domain.day_log import DayLogService
from worklog.domain.draft import LogDraft
from worklog.domain.entities import SaveOutcome
from worklog.domain.errors import NotFoundError, ValidationError


class TestSave:
    """Tests for saving drafts."""

    def test_save_and_get(self, day_log_service):
        """A saved draft can be read back."""
        draft = day_log_service.open_draft("2026-10-19")
        draft.set_projects(["CMPC"])
        draft.description = "Ajustes"
        draft.add_file("a.sql")

        assert day_log_service.save(draft) == SaveOutcome.SAVED
        log = day_log_service.get("2026-10-19")
        assert log.projects == ("CMPC",)
        assert log.description == "Ajustes"
        assert log.files == "a.sql"
        assert log.file_project_map == {"a.sql": "CMPC"}

    def test_save_empty_draft_deletes(self, day_log_service, sample_logs):
        """Saving an empty draft removes the stored entry."""
        draft = day_log_service.open_draft("2026-10-07")
        draft.set_projects([])

        assert day_log_service.save(draft) == SaveOutcome.DELETED
        assert day_log_service.get("2026-10-07") is None

    def test_save_empty_draft_without_entry(self, day_log_service):
        """Saving an empty draft for an empty day stores nothing."""
        outcome = day_log_service.save(LogDraft(date="2026-10-19"))
        assert outcome == SaveOutcome.DELETED
        assert day_log_service.list_month(2026, 10) == []

    def test_save_fully_replaces(self, day_log_service, sample_logs):
        """Fields and maps absent from the draft are gone after save."""
        day_log_service.save(LogDraft(date="2026-10-06", projects=["CMPC"]))
        log = day_log_service.get("2026-10-06")
        assert log.projects == ("CMPC",)
        assert log.description == ""
        assert log.files == ""
        assert log.file_project_map == {}
        assert log.file_category_map == {}

    def test_save_invalid_date(self, day_log_service):
        """Drafts must carry a real calendar date."""
        with pytest.raises(ValidationError):
            day_log_service.save(LogDraft(date="2026-02-30", projects=["CMPC"]))

    def test_logs_are_per_user(self, temp_db, day_log_service, sample_logs):
        """Another user sees none of the sample user's entries."""
        other = DayLogService(temp_db, "bruno")
        assert other.list_month(2026, 10) == []
        assert other.get("2026-10-05") is None


class TestDelete:
    """Tests for deleting entries."""

    def test_delete(self, day_log_service, sample_logs):
        """Deleting removes the entry."""
        assert day_log_service.delete("2026-10-05") is True
        assert day_log_service.get("2026-10-05") is None

    def test_delete_is_idempotent(self, day_log_service):
        """Deleting a missing entry succeeds."""
        assert day_log_service.delete("2026-10-19") is False
        assert day_log_service.delete("2026-10-19") is False


class TestDuplicate:
    """Tests for copying entries between dates."""

    def test_duplicate_copies_everything(self, day_log_service, sample_logs):
        """The copy carries projects, description, files and maps."""
        copy = day_log_service.duplicate("2026-10-06", "2026-10-20")
        stored = day_log_service.get("2026-10-20")

        assert stored == copy
        assert stored.projects == ("Tekno",)
        assert stored.description == "Revisão de layout"
        assert stored.files == "estilo.css"
        assert stored.file_project_map == {"estilo.css": "Tekno"}
        assert stored.file_category_map == {"estilo.css": "outros"}

    def test_duplicate_replaces_target(self, day_log_service, sample_logs):
        """Whatever was on the target date is overwritten."""
        day_log_service.duplicate("2026-10-06", "2026-10-05")
        log = day_log_service.get("2026-10-05")
        assert log.projects == ("Tekno",)
        assert log.files == "estilo.css"

    def test_duplicate_empty_target(self, day_log_service, sample_logs):
        """A target date is required."""
        with pytest.raises(ValidationError, match="Target date is required"):
            day_log_service.duplicate("2026-10-05", "  ")

    def test_duplicate_missing_source(self, day_log_service):
        """The source date must have an entry."""
        with pytest.raises(NotFoundError):
            day_log_service.duplicate("2026-10-01", "2026-10-02")


class TestListing:
    """Tests for month listings."""

    def test_list_month_ordered(self, day_log_service, sample_logs):
        """Entries come back in date order."""
        day_log_service.save(LogDraft(date="2026-10-01", description="Início"))
        dates = [log.date for log in day_log_service.list_month(2026, 10)]
        assert dates == ["2026-10-01", "2026-10-05", "2026-10-06", "2026-10-07"]

    def test_list_month_bounds(self, day_log_service):
        """Only days inside the month are listed."""
        for date in ("2026-09-30", "2026-10-01", "2026-10-31", "2026-11-01"):
            day_log_service.save(LogDraft(date=date, description=date))
        dates = [log.date for log in day_log_service.list_month(2026, 10)]
        assert dates == ["2026-10-01", "2026-10-31"]


class TestSubscription:
    """Tests for the live log subscription."""

    def test_listener_receives_snapshots(self, temp_db, day_log_service):
        """Listeners get the current list at once and after each change."""
        snapshots = []
        unsubscribe = temp_db.subscribe_logs("ana", snapshots.append)
        assert snapshots == [[]]

        day_log_service.save(LogDraft(date="2026-10-19", description="Dia"))
        assert [log.date for log in snapshots[-1]] == ["2026-10-19"]

        day_log_service.delete("2026-10-19")
        assert snapshots[-1] == []

        unsubscribe()
        count = len(snapshots)
        day_log_service.save(LogDraft(date="2026-10-20", description="Dia"))
        assert len(snapshots) == count

    def test_listener_ignores_other_users(self, temp_db, day_log_service):
        """Changes to another user's logs are not pushed."""
        snapshots = []
        temp_db.subscribe_logs("bruno", snapshots.append)
        day_log_service.save(LogDraft(date="2026-10-19", description="Dia"))
        assert snapshots == [[]]

    def test_draft_unaffected_by_pushes(self, temp_db, day_log_service, sample_logs):
        """An open draft keeps its contents when the store changes."""
        draft = day_log_service.open_draft("2026-10-05")
        other_service = DayLogService(temp_db, "ana")
        other_service.save(LogDraft(date="2026-10-05", description="Outro"))

        assert draft.description == "Ajuste de consultas"
        day_log_service.save(draft)
        assert day_log_service.get("2026-10-05").description == "Ajuste de consultas"
