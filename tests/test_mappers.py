"""Tests for mappers between ORM models and domain entities."""

from datetime import datetime, UTC

from worklog.database import models
from worklog.database.mappers import (
    as_utc,
    day_log_from_dict,
    day_log_to_dict,
    day_log_to_domain,
    project_to_domain,
    share_to_domain,
    user_to_domain,
)
from worklog.domain.entities import DayLog


class TestMappers:
    """Tests for mapper functions."""

    def test_user_to_domain(self):
        orm_user = models.User(user_id="ana", display_name="Ana", avatar_url=None)
        user = user_to_domain(orm_user)
        assert (user.user_id, user.display_name, user.avatar_url) == ("ana", "Ana", None)

    def test_project_to_domain(self):
        project = project_to_domain(models.Project(id=3, name="CMPC"))
        assert (project.id, project.name) == (3, "CMPC")

    def test_day_log_to_domain(self):
        """JSON lists become tuples and missing values get defaults."""
        orm_log = models.DayLog(
            user_id="ana",
            date="2026-10-05",
            projects=["CMPC", "Tekno"],
            description=None,
            files=None,
            file_project_map=None,
            file_category_map=None,
        )
        log = day_log_to_domain(orm_log)
        assert log.projects == ("CMPC", "Tekno")
        assert log.description == ""
        assert log.files == ""
        assert log.file_project_map is None
        assert log.file_category_map == {}

    def test_day_log_dict_uses_camel_case(self):
        """Logs frozen in shares keep the camelCase field names."""
        log = DayLog(
            date="2026-10-05",
            user_id="ana",
            projects=("CMPC",),
            files="a.sql",
            file_project_map={"a.sql": "CMPC"},
            file_category_map={"a.sql": "mii"},
        )
        data = day_log_to_dict(log)
        assert data["userId"] == "ana"
        assert data["fileProjectMap"] == {"a.sql": "CMPC"}
        assert data["fileCategoryMap"] == {"a.sql": "mii"}
        assert day_log_from_dict(data) == log

    def test_day_log_from_dict_legacy(self):
        """Missing map keys read as a legacy entry."""
        log = day_log_from_dict({"date": "2026-10-05", "projects": ["CMPC"]})
        assert log.file_project_map is None
        assert log.file_category_map == {}
        assert log.user_id == ""

    def test_as_utc(self):
        naive = datetime(2026, 10, 19, 12, 0)
        assert as_utc(naive).tzinfo is UTC
        aware = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)
        assert as_utc(aware) is aware
        assert as_utc(None) is None

    def test_share_to_domain(self):
        orm_share = models.Share(
            share_id="s1",
            user_id="ana",
            year=2026,
            month=10,
            month_name="outubro de 2026",
            user_name="Ana",
            logs=[{"date": "2026-10-05", "userId": "ana", "projects": ["CMPC"]}],
            created_at=datetime(2026, 10, 1),
            expires_at=datetime(2026, 10, 31),
            is_active=True,
        )
        share = share_to_domain(orm_share)
        assert share.logs[0].projects == ("CMPC",)
        assert share.expires_at == datetime(2026, 10, 31, tzinfo=UTC)
