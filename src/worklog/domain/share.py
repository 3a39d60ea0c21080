"""Share snapshot domain service."""

import os
import secrets
from datetime import datetime, timedelta, UTC
from typing import Optional

from worklog.database.base import Database
from worklog.domain.entities import ShareSnapshot, User
from worklog.domain.errors import (
    NotFoundError,
    ShareUnavailableError,
    ShareUnavailableReason,
    ValidationError,
    storage_errors,
)
from worklog.utils.date_parser import month_name, month_range
from worklog.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_SHARE_DAYS = 30


def default_share_days() -> int:
    """Share lifetime from WORKLOG_SHARE_DAYS, falling back to 30 days."""
    value = os.environ.get("WORKLOG_SHARE_DAYS")
    if not value:
        return DEFAULT_SHARE_DAYS
    try:
        days = int(value)
    except ValueError:
        logger.warning("Ignoring invalid WORKLOG_SHARE_DAYS=%r", value)
        return DEFAULT_SHARE_DAYS
    return days if days > 0 else DEFAULT_SHARE_DAYS


class ShareService:
    """Service for publishing read-only month snapshots."""

    def __init__(self, db: Database, user: Optional[User] = None):
        """Initialize share service.

        Args:
            db: Database instance
            user: Owner; only needed to create, list or revoke shares
        """
        self.db = db
        self.user = user

    def _owner(self) -> User:
        if self.user is None:
            raise ValidationError("Sign in to manage share links")
        return self.user

    def create(
        self,
        year: int,
        month: int,
        expires_in_days: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> ShareSnapshot:
        """Publish the month's logs as a snapshot.

        An existing share for the same month is regenerated in place: same
        ID, fresh logs, new expiry, active again.

        Args:
            year: Year of the month to share
            month: Month to share (1-12)
            expires_in_days: Lifetime in days (defaults to WORKLOG_SHARE_DAYS or 30)
            now: Current time, for testing

        Returns:
            The stored snapshot
        """
        owner = self._owner()
        if expires_in_days is None:
            expires_in_days = default_share_days()
        if expires_in_days <= 0:
            raise ValidationError("Share lifetime must be at least one day")

        now = now or datetime.now(UTC)
        start, end = month_range(year, month)
        logs = self.db.list_logs(owner.user_id, start_date=start, end_date=end)

        existing = self.db.find_share(owner.user_id, year, month)
        share_id = existing.share_id if existing is not None else secrets.token_urlsafe(16)

        snapshot = ShareSnapshot(
            share_id=share_id,
            user_id=owner.user_id,
            logs=tuple(logs),
            year=year,
            month=month,
            month_name=month_name(year, month),
            user_name=owner.display_name,
            created_at=now,
            expires_at=now + timedelta(days=expires_in_days),
            is_active=True,
        )
        with storage_errors(logger, f"create share for {year:04d}-{month:02d}"):
            self.db.put_share(snapshot)
        logger.info(
            "%s share %s for %04d-%02d (%d entries)",
            "Regenerated" if existing else "Created",
            share_id,
            year,
            month,
            len(logs),
        )
        return snapshot

    def revoke(self, share_id: str) -> None:
        """Deactivate one of the owner's shares.

        Raises:
            NotFoundError: If the share doesn't exist or belongs to someone else
        """
        owner = self._owner()
        share = self.db.get_share(share_id)
        if share is None or share.user_id != owner.user_id:
            raise NotFoundError(f"Share {share_id} not found")
        with storage_errors(logger, f"revoke share {share_id}"):
            self.db.set_share_active(share_id, False)
        logger.info("Revoked share %s", share_id)

    def list_shares(self) -> list[ShareSnapshot]:
        return self.db.list_shares(self._owner().user_id)

    def fetch(self, share_id: str, now: Optional[datetime] = None) -> ShareSnapshot:
        """Fetch a share without authentication.

        Expiry is checked before the active flag, so an expired snapshot is
        never returned.

        Raises:
            ShareUnavailableError: If the share is missing, expired or disabled
        """
        now = now or datetime.now(UTC)
        share = self.db.get_share(share_id)
        if share is None:
            raise ShareUnavailableError(share_id, ShareUnavailableReason.NOT_FOUND)
        if share.is_expired(now):
            raise ShareUnavailableError(share_id, ShareUnavailableReason.EXPIRED)
        if not share.is_active:
            raise ShareUnavailableError(share_id, ShareUnavailableReason.DISABLED)
        return share
