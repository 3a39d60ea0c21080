"""Tests for SessionService and ProjectService."""

import pytest

from worklog.domain.errors import ConflictError, NotFoundError, ValidationError
from worklog.domain.project import INITIAL_PROJECTS


class TestSessionService:
    """Tests for signing in and out."""

    def test_sign_in(self, session_service):
        """Signing in records the user and the session."""
        user = session_service.sign_in(" ana ", "Ana Souza", "https://example.com/a.png")
        assert user.user_id == "ana"
        assert session_service.current_user() == user

    def test_sign_in_replaces_session(self, session_service):
        """Only one user is signed in at a time."""
        session_service.sign_in("ana", "Ana")
        session_service.sign_in("bruno", "Bruno")
        assert session_service.current_user().user_id == "bruno"

    def test_sign_in_updates_profile(self, session_service):
        """Signing in again updates the display name."""
        session_service.sign_in("ana", "Ana")
        session_service.sign_in("ana", "Ana Souza")
        assert session_service.current_user().display_name == "Ana Souza"

    @pytest.mark.parametrize("user_id,name", [("", "Ana"), ("ana", "  ")])
    def test_sign_in_requires_fields(self, session_service, user_id, name):
        with pytest.raises(ValidationError):
            session_service.sign_in(user_id, name)

    def test_sign_out(self, session_service, sample_user):
        """Signing out clears the session."""
        session_service.sign_out()
        assert session_service.current_user() is None

    def test_sign_out_without_session(self, session_service):
        with pytest.raises(ValidationError):
            session_service.sign_out()

    def test_resolve_user(self, session_service, sample_user):
        """Explicit IDs win over the session; unknown IDs still resolve."""
        assert session_service.resolve_user() == sample_user
        assert session_service.resolve_user("ana").display_name == "Ana Souza"
        stranger = session_service.resolve_user("carla")
        assert (stranger.user_id, stranger.display_name) == ("carla", "carla")


class TestProjectService:
    """Tests for the project list."""

    def test_ensure_initial_projects(self, project_service):
        """The initial list is seeded once."""
        assert project_service.ensure_initial_projects() is True
        assert project_service.ensure_initial_projects() is False
        names = [p.name for p in project_service.list_projects()]
        assert sorted(names) == sorted(INITIAL_PROJECTS)

    def test_no_seed_when_projects_exist(self, project_service):
        """An existing list is left alone."""
        project_service.add_project("Interno")
        assert project_service.ensure_initial_projects() is False
        assert [p.name for p in project_service.list_projects()] == ["Interno"]

    def test_add_project(self, temp_db, project_service):
        project_id = project_service.add_project("  Nova  ")
        project = temp_db.get_project_by_name("Nova")
        assert project.id == project_id

    def test_add_blank_project(self, project_service):
        with pytest.raises(ValidationError):
            project_service.add_project("  ")

    def test_add_duplicate_project(self, project_service):
        project_service.add_project("CMPC")
        with pytest.raises(ConflictError, match="already exists"):
            project_service.add_project("CMPC")

    def test_delete_project(self, temp_db, project_service):
        project_service.add_project("CMPC")
        project_service.delete_project("CMPC")
        assert temp_db.get_project_by_name("CMPC") is None

    def test_delete_missing_project(self, project_service):
        with pytest.raises(NotFoundError):
            project_service.delete_project("Nada")

    def test_list_sorted_case_insensitively(self, project_service):
        for name in ("tekno", "CMPC", "essentia", "Melitta"):
            project_service.add_project(name)
        assert [p.name for p in project_service.list_projects()] == ["CMPC", "essentia", "Melitta", "tekno"]
