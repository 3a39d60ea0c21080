"""In-memory view of one month of day logs, fed by the store subscription."""

import calendar
from datetime import date
from typing import Callable, Optional

from worklog.database.base import Database
from worklog.domain.entities import CalendarDay, DayLog
from worklog.utils.date_parser import month_range, shift_month
from worklog.utils.logging import get_logger

logger = get_logger(__name__)


class MonthIndex:
    """Day logs of the viewed month, kept current by a live subscription.

    Every push carries the user's full list of logs; the index keeps the
    ones inside the viewed month. Edit drafts are separate copies and are
    not affected by pushes.
    """

    def __init__(self, db: Database, user_id: str, year: int, month: int):
        self.db = db
        self.user_id = user_id
        self.year = year
        self.month = month
        self._snapshot: list[DayLog] = []
        self._logs: dict[str, DayLog] = {}
        self._unsubscribe: Optional[Callable[[], None]] = None

    def __enter__(self) -> "MonthIndex":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()

    @property
    def is_live(self) -> bool:
        return self._unsubscribe is not None

    def start(self) -> None:
        """Subscribe to the user's logs."""
        if self._unsubscribe is None:
            self._unsubscribe = self.db.subscribe_logs(self.user_id, self._on_snapshot)

    def stop(self) -> None:
        """Drop the subscription."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_snapshot(self, logs: list[DayLog]) -> None:
        self._snapshot = list(logs)
        self._refilter()
        logger.debug("Month index %04d-%02d refreshed: %d entries", self.year, self.month, len(self._logs))

    def _refilter(self) -> None:
        start, end = month_range(self.year, self.month)
        self._logs = {log.date: log for log in self._snapshot if start <= log.date <= end}

    def navigate(self, delta: int) -> None:
        """Move the viewed month by delta months."""
        self.year, self.month = shift_month(self.year, self.month, delta)
        self._refilter()

    def get(self, date_key: str) -> Optional[DayLog]:
        return self._logs.get(date_key)

    def logs(self) -> list[DayLog]:
        """Entries of the month in date order."""
        return [self._logs[key] for key in sorted(self._logs)]

    def __len__(self) -> int:
        return len(self._logs)

    def days(self) -> list[CalendarDay]:
        """One cell per day of the month, with its entry if any."""
        last_day = calendar.monthrange(self.year, self.month)[1]
        result = []
        for day in range(1, last_day + 1):
            current = date(self.year, self.month, day)
            key = current.strftime("%Y-%m-%d")
            result.append(
                CalendarDay(date=key, day=day, weekday=current.weekday(), log=self._logs.get(key))
            )
        return result
