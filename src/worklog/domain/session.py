"""Sign-in session domain service."""

from typing import Optional

from worklog.database.base import Database
from worklog.domain.entities import User
from worklog.domain.errors import ValidationError, storage_errors
from worklog.utils.logging import get_logger

logger = get_logger(__name__)


class SessionService:
    """Service for signing users in and out."""

    def __init__(self, db: Database):
        """Initialize session service.

        Args:
            db: Database instance
        """
        self.db = db

    def sign_in(self, user_id: str, display_name: str, avatar_url: Optional[str] = None) -> User:
        """Sign a user in, recording their profile.

        Args:
            user_id: Stable identifier from the identity provider
            display_name: Name shown on shares and exports
            avatar_url: Optional avatar URL

        Returns:
            The signed-in user

        Raises:
            ValidationError: If user_id or display_name is blank
        """
        user_id = user_id.strip()
        display_name = display_name.strip()
        if not user_id:
            raise ValidationError("User ID cannot be empty")
        if not display_name:
            raise ValidationError("Display name cannot be empty")

        with storage_errors(logger, "sign in"):
            self.db.upsert_user(user_id, display_name, avatar_url)
            self.db.set_active_user(user_id)
        logger.info("Signed in as %s", user_id)
        return User(user_id=user_id, display_name=display_name, avatar_url=avatar_url)

    def sign_out(self) -> None:
        """Sign the current user out.

        Raises:
            ValidationError: If nobody is signed in
        """
        with storage_errors(logger, "sign out"):
            had_session = self.db.clear_active_user()
        if not had_session:
            raise ValidationError("Nobody is signed in")
        logger.info("Signed out")

    def current_user(self) -> Optional[User]:
        """Return the signed-in user, if any."""
        return self.db.get_active_user()

    def resolve_user(self, user_id: Optional[str] = None) -> Optional[User]:
        """Return the user for an explicit ID, or the signed-in user.

        An explicit ID that was never signed in still resolves, using the
        ID as display name.
        """
        if user_id:
            return self.db.get_user(user_id) or User(user_id=user_id, display_name=user_id)
        return self.current_user()
