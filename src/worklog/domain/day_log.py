"""Day log domain service."""

from typing import Optional

from worklog.database.base import Database
from worklog.domain.draft import LogDraft
from worklog.domain.entities import DayLog, SaveOutcome
from worklog.domain.errors import (
    NotFoundError,
    ValidationError,
    log_not_found,
    storage_errors,
)
from worklog.utils.date_parser import month_range, validate_date_key
from worklog.utils.logging import get_logger

logger = get_logger(__name__)


def _check_date(value: str) -> str:
    try:
        return validate_date_key(value)
    except ValueError as e:
        raise ValidationError(str(e))


class DayLogService:
    """Service for reading and writing one user's day logs."""

    def __init__(self, db: Database, user_id: str):
        """Initialize day log service.

        Args:
            db: Database instance
            user_id: Owner of the logs
        """
        self.db = db
        self.user_id = user_id

    def get(self, date: str) -> Optional[DayLog]:
        """Get the entry for a date, or None."""
        return self.db.get_log(self.user_id, _check_date(date))

    def list_month(self, year: int, month: int) -> list[DayLog]:
        """List entries of a month ordered by date."""
        start, end = month_range(year, month)
        return self.db.list_logs(self.user_id, start_date=start, end_date=end)

    def open_draft(self, date: str) -> LogDraft:
        """Open an edit draft for a date from its stored entry."""
        date = _check_date(date)
        return LogDraft.open(date, self.db.get_log(self.user_id, date))

    def save(self, draft: LogDraft) -> SaveOutcome:
        """Persist a draft.

        An empty draft (no description, files or projects) deletes the
        date's entry instead of storing an empty record. Otherwise the
        stored entry is fully replaced.

        Raises:
            StorageError: If the store rejects the write
        """
        date = _check_date(draft.date)
        if draft.is_empty:
            self.delete(date)
            return SaveOutcome.DELETED

        log = draft.to_log(self.user_id)
        with storage_errors(logger, f"save entry for {date}"):
            self.db.put_log(log)
        logger.info("Saved entry for %s", date)
        return SaveOutcome.SAVED

    def delete(self, date: str) -> bool:
        """Delete the entry for a date. Deleting a missing entry is not an error.

        Returns:
            True if an entry was removed
        """
        date = _check_date(date)
        with storage_errors(logger, f"delete entry for {date}"):
            removed = self.db.delete_log(self.user_id, date)
        logger.info("Deleted entry for %s", date)
        return removed

    def duplicate(self, source_date: str, target_date: str) -> DayLog:
        """Copy an entry, file assignments included, to another date.

        Any entry already stored on the target date is replaced.

        Raises:
            ValidationError: If the target date is empty or invalid
            NotFoundError: If the source date has no entry
        """
        if not target_date or not target_date.strip():
            raise ValidationError("Target date is required")
        source_date = _check_date(source_date)
        target_date = _check_date(target_date)

        source = self.db.get_log(self.user_id, source_date)
        if source is None:
            raise NotFoundError(log_not_found(source_date))

        copy = DayLog(
            date=target_date,
            user_id=self.user_id,
            projects=source.projects,
            description=source.description,
            files=source.files,
            file_project_map=(
                dict(source.file_project_map) if source.file_project_map is not None else None
            ),
            file_category_map=dict(source.file_category_map),
        )
        with storage_errors(logger, f"duplicate {source_date} to {target_date}"):
            self.db.put_log(copy)
        logger.info("Duplicated entry %s to %s", source_date, target_date)
        return copy
