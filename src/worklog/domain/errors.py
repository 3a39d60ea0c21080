"""Shared domain error messages and error types."""

import logging
from contextlib import contextmanager
from enum import Enum
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class DuplicateFileError(ValidationError):
    """File name already present in the day being edited."""

    def __init__(self, file_name: str):
        super().__init__(duplicate_file(file_name))
        self.file_name = file_name


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class StorageError(DomainError):
    """A write or read against the store failed."""


class ImportFileError(DomainError):
    """Spreadsheet could not be read."""


class ShareUnavailableReason(str, Enum):
    """Why a share link cannot be displayed."""

    NOT_FOUND = "not_found"
    EXPIRED = "expired"
    DISABLED = "disabled"


class ShareUnavailableError(DomainError):
    """Share link is missing, expired or deactivated."""

    def __init__(self, share_id: str, reason: ShareUnavailableReason):
        super().__init__(share_unavailable(share_id, reason))
        self.share_id = share_id
        self.reason = reason


def duplicate_file(file_name: str) -> str:
    """Return message for a file already listed in the day."""
    return f"File '{file_name}' is already in this day's list"


def log_not_found(log_date: str) -> str:
    """Return message for a date with no entry."""
    return f"No entry for {log_date}"


def project_not_found(name: str) -> str:
    """Return message for missing project."""
    return f"Project '{name}' not found"


def duplicate_project(name: str) -> str:
    """Return message for duplicate project name."""
    return f"Project '{name}' already exists"


def share_unavailable(share_id: str, reason: ShareUnavailableReason) -> str:
    """Return message for a share link that cannot be shown."""
    if reason == ShareUnavailableReason.EXPIRED:
        return f"Share link {share_id} has expired"
    if reason == ShareUnavailableReason.DISABLED:
        return f"Share link {share_id} has been disabled"
    return f"Share link {share_id} not found"


@contextmanager
def storage_errors(logger: logging.Logger, action: str) -> Iterator[None]:
    """Log store failures and re-raise them as StorageError."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.error("Failed to %s: %s", action, e)
        raise StorageError(f"Could not {action}: {e}") from e
