"""Domain model entities for worklog.

These are pure data classes representing business concepts, independent of
database schema. Storage details (JSON columns, comma-joined file lists)
stay in the database layer and mappers.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


def split_files(files: Optional[str]) -> list[str]:
    """Split a comma-joined file list, trimming and dropping empties."""
    if not files:
        return []
    return [f.strip() for f in files.split(",") if f.strip()]


def join_files(files: list[str]) -> str:
    """Join file names into the stored comma-joined form."""
    return ",".join(files)


@dataclass(frozen=True)
class User:
    """Signed-in identity."""

    user_id: str
    display_name: str
    avatar_url: Optional[str] = None


@dataclass(frozen=True)
class Project:
    """Project domain entity."""

    id: int
    name: str


@dataclass(frozen=True)
class DayLog:
    """One calendar day of logged work.

    file_project_map is None for legacy records saved before file
    assignments existed; an empty dict means "stored, but nothing assigned".
    """

    date: str
    user_id: str
    projects: tuple[str, ...] = ()
    description: str = ""
    files: str = ""
    file_project_map: Optional[dict[str, str]] = None
    file_category_map: dict[str, str] = field(default_factory=dict)

    @property
    def file_list(self) -> list[str]:
        """Files as a list, in stored order."""
        return split_files(self.files)

    @property
    def is_empty(self) -> bool:
        """True when the record carries nothing worth storing."""
        return not self.description and not self.files and not self.projects


@dataclass(frozen=True)
class ShareSnapshot:
    """Frozen, time-boxed copy of one month of logs."""

    share_id: str
    user_id: str
    logs: tuple[DayLog, ...]
    year: int
    month: int
    month_name: str
    user_name: str
    created_at: datetime
    expires_at: datetime
    is_active: bool = True

    def is_expired(self, now: datetime) -> bool:
        """True once expires_at has passed."""
        return self.expires_at < now


class SaveOutcome(str, Enum):
    """Result of saving a draft."""

    SAVED = "saved"
    DELETED = "deleted"


@dataclass(frozen=True)
class ImportResult:
    """Counts reported by a spreadsheet import."""

    imported: int
    skipped: int


@dataclass(frozen=True)
class CalendarDay:
    """One day cell of a month view."""

    date: str
    day: int
    weekday: int
    log: Optional[DayLog] = None

    @property
    def is_weekend(self) -> bool:
        return self.weekday >= 5
