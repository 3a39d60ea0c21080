"""Shared pytest fixtures for worklog tests."""

import tempfile
import os
import pytest

from worklog.database.factories import create_sqlite_database
from worklog.domain.day_log import DayLogService
from worklog.domain.draft import LogDraft
from worklog.domain.entities import DayLog
from worklog.domain.project import ProjectService
from worklog.domain.session import SessionService
from worklog.domain.share import ShareService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def session_service(temp_db):
    """Create a SessionService with a temporary database."""
    return SessionService(temp_db)


@pytest.fixture
def sample_user(session_service):
    """Sign in a sample user."""
    return session_service.sign_in("ana", "Ana Souza")


@pytest.fixture
def project_service(temp_db):
    """Create a ProjectService with a temporary database."""
    return ProjectService(temp_db)


@pytest.fixture
def day_log_service(temp_db, sample_user):
    """Create a DayLogService for the sample user."""
    return DayLogService(temp_db, sample_user.user_id)


@pytest.fixture
def share_service(temp_db, sample_user):
    """Create a ShareService owned by the sample user."""
    return ShareService(temp_db, sample_user)


@pytest.fixture
def sample_logs(day_log_service):
    """Store a few October 2026 entries and return them by date."""
    drafts = [
        LogDraft(
            date="2026-10-05",
            projects=["CMPC", "Tekno"],
            description="Ajuste de consultas",
            files=["consulta.qry", "relatorio.sql", "tela.js"],
            file_project_map={
                "consulta.qry": "CMPC",
                "relatorio.sql": "CMPC",
                "tela.js": "Tekno",
            },
        ),
        LogDraft(
            date="2026-10-06",
            projects=["Tekno"],
            description="Revisão de layout",
            files=["estilo.css"],
            file_project_map={"estilo.css": "Tekno"},
            file_category_map={"estilo.css": "outros"},
        ),
        LogDraft(
            date="2026-10-07",
            projects=["CMPC", "Tekno", "Melitta", "Essentia"],
            description="",
            files=[],
        ),
    ]
    for draft in drafts:
        day_log_service.save(draft)
    return {log.date: log for log in day_log_service.list_month(2026, 10)}


@pytest.fixture
def legacy_log():
    """A stored entry from before file assignments existed."""
    return DayLog(
        date="2026-10-08",
        user_id="ana",
        projects=("CMPC", "Tekno"),
        description="Dia antigo",
        files="a.sql,b.js,c.trx",
        file_project_map=None,
    )


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
