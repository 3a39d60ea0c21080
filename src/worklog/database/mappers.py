"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic: JSON columns, naive datetimes
returned by SQLite and the dict form of logs frozen inside shares.
"""

from datetime import datetime, UTC
from typing import Any, Optional

from worklog.domain import entities as domain
from worklog.database.models import (
    User as ORMUser,
    Project as ORMProject,
    DayLog as ORMDayLog,
    Share as ORMShare,
)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive datetimes read back from the store."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)


def user_to_domain(orm_user: ORMUser) -> domain.User:
    """Convert SQLAlchemy User model to domain User entity."""
    return domain.User(
        user_id=orm_user.user_id,
        display_name=orm_user.display_name,
        avatar_url=orm_user.avatar_url,
    )


def project_to_domain(orm_project: ORMProject) -> domain.Project:
    """Convert SQLAlchemy Project model to domain Project entity."""
    return domain.Project(id=orm_project.id, name=orm_project.name)


def day_log_to_domain(orm_log: ORMDayLog) -> domain.DayLog:
    """Convert SQLAlchemy DayLog model to domain DayLog entity."""
    return domain.DayLog(
        date=orm_log.date,
        user_id=orm_log.user_id,
        projects=tuple(orm_log.projects or ()),
        description=orm_log.description or "",
        files=orm_log.files or "",
        file_project_map=(
            dict(orm_log.file_project_map) if orm_log.file_project_map is not None else None
        ),
        file_category_map=dict(orm_log.file_category_map or {}),
    )


def day_log_to_dict(log: domain.DayLog) -> dict[str, Any]:
    """Serialize a DayLog for storage inside a share snapshot."""
    return {
        "date": log.date,
        "userId": log.user_id,
        "projects": list(log.projects),
        "description": log.description,
        "files": log.files,
        "fileProjectMap": log.file_project_map,
        "fileCategoryMap": log.file_category_map,
    }


def day_log_from_dict(data: dict[str, Any]) -> domain.DayLog:
    """Rebuild a DayLog frozen inside a share snapshot."""
    file_project_map = data.get("fileProjectMap")
    return domain.DayLog(
        date=data["date"],
        user_id=data.get("userId", ""),
        projects=tuple(data.get("projects") or ()),
        description=data.get("description") or "",
        files=data.get("files") or "",
        file_project_map=dict(file_project_map) if file_project_map is not None else None,
        file_category_map=dict(data.get("fileCategoryMap") or {}),
    )


def share_to_domain(orm_share: ORMShare) -> domain.ShareSnapshot:
    """Convert SQLAlchemy Share model to domain ShareSnapshot entity."""
    return domain.ShareSnapshot(
        share_id=orm_share.share_id,
        user_id=orm_share.user_id,
        logs=tuple(day_log_from_dict(item) for item in orm_share.logs or ()),
        year=orm_share.year,
        month=orm_share.month,
        month_name=orm_share.month_name,
        user_name=orm_share.user_name,
        created_at=as_utc(orm_share.created_at),
        expires_at=as_utc(orm_share.expires_at),
        is_active=orm_share.is_active,
    )
