"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Callable, Optional, Sequence

# Import entities directly to avoid circular import through domain/__init__.py
from worklog.domain.entities import (
    User,
    Project,
    DayLog,
    ShareSnapshot,
)

LogsListener = Callable[[list[DayLog]], None]


class Database(ABC):
    """Abstract database interface for worklog.

    Besides point reads and writes, the store offers a live subscription
    per user: listeners receive the user's full list of logs after every
    committed change to that user's logs.
    """

    def __init__(self) -> None:
        self._log_listeners: dict[str, list[LogsListener]] = {}

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # User and session operations
    @abstractmethod
    def upsert_user(self, user_id: str, display_name: str, avatar_url: Optional[str] = None) -> None:
        """Create or update a user."""
        pass

    @abstractmethod
    def get_user(self, user_id: str) -> Optional[User]:
        """Get user by ID."""
        pass

    @abstractmethod
    def set_active_user(self, user_id: str) -> None:
        """Record user_id as the signed-in session, replacing any other."""
        pass

    @abstractmethod
    def get_active_user(self) -> Optional[User]:
        """Get the signed-in user, if any."""
        pass

    @abstractmethod
    def clear_active_user(self) -> bool:
        """End the signed-in session. Returns False if there was none."""
        pass

    # Project operations
    @abstractmethod
    def create_project(self, name: str) -> int:
        """Create a project. Returns project ID."""
        pass

    @abstractmethod
    def create_projects(self, names: Sequence[str]) -> None:
        """Create several projects in one transaction."""
        pass

    @abstractmethod
    def get_project_by_name(self, name: str) -> Optional[Project]:
        """Get project by name."""
        pass

    @abstractmethod
    def list_projects(self) -> list[Project]:
        """List all projects."""
        pass

    @abstractmethod
    def delete_project(self, project_id: int) -> None:
        """Delete a project."""
        pass

    # Day log operations
    @abstractmethod
    def put_log(self, log: DayLog) -> None:
        """Write a day log, fully replacing any record for the same user and date."""
        pass

    @abstractmethod
    def put_logs(self, logs: Sequence[DayLog]) -> None:
        """Write several day logs in one transaction (all or nothing)."""
        pass

    @abstractmethod
    def get_log(self, user_id: str, date: str) -> Optional[DayLog]:
        """Get a day log by date."""
        pass

    @abstractmethod
    def delete_log(self, user_id: str, date: str) -> bool:
        """Delete a day log. Returns False if nothing was stored."""
        pass

    @abstractmethod
    def list_logs(
        self,
        user_id: str,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> list[DayLog]:
        """List a user's day logs ordered by date, optionally within a date key range."""
        pass

    # Share operations
    @abstractmethod
    def put_share(self, share: ShareSnapshot) -> None:
        """Write a share snapshot, replacing any with the same ID."""
        pass

    @abstractmethod
    def get_share(self, share_id: str) -> Optional[ShareSnapshot]:
        """Get a share snapshot by ID."""
        pass

    @abstractmethod
    def find_share(self, user_id: str, year: int, month: int) -> Optional[ShareSnapshot]:
        """Get the user's share for a month, if one exists."""
        pass

    @abstractmethod
    def list_shares(self, user_id: str) -> list[ShareSnapshot]:
        """List a user's shares, newest first."""
        pass

    @abstractmethod
    def set_share_active(self, share_id: str, is_active: bool) -> None:
        """Activate or deactivate a share."""
        pass

    # Live subscription
    def subscribe_logs(self, user_id: str, listener: LogsListener) -> Callable[[], None]:
        """Register a listener for a user's logs.

        The listener is called once immediately with the current snapshot,
        then after every change.

        Returns:
            Function that removes the listener
        """
        listeners = self._log_listeners.setdefault(user_id, [])
        listeners.append(listener)
        listener(self.list_logs(user_id))

        def unsubscribe() -> None:
            if listener in listeners:
                listeners.remove(listener)

        return unsubscribe

    def _notify_logs(self, user_ids: Sequence[str]) -> None:
        for user_id in dict.fromkeys(user_ids):
            listeners = list(self._log_listeners.get(user_id, ()))
            if not listeners:
                continue
            snapshot = self.list_logs(user_id)
            for listener in listeners:
                listener(list(snapshot))
