"""Project domain service."""


from worklog.database.base import Database
from worklog.domain.entities import Project
from worklog.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    duplicate_project,
    project_not_found,
    storage_errors,
)
from worklog.utils.logging import get_logger

logger = get_logger(__name__)

INITIAL_PROJECTS = ("CMPC", "Tekno", "Melitta", "Essentia")


class ProjectService:
    """Service for managing the shared project list."""

    def __init__(self, db: Database):
        """Initialize project service.

        Args:
            db: Database instance
        """
        self.db = db

    def ensure_initial_projects(self) -> bool:
        """Seed the initial projects when the list is empty.

        Returns:
            True if projects were created
        """
        if self.db.list_projects():
            return False
        with storage_errors(logger, "create initial projects"):
            self.db.create_projects(INITIAL_PROJECTS)
        logger.info("Created initial projects: %s", ", ".join(INITIAL_PROJECTS))
        return True

    def add_project(self, name: str) -> int:
        """Add a project.

        Args:
            name: Project name

        Returns:
            Project ID

        Raises:
            ValidationError: If the name is blank
            ConflictError: If a project with the same name exists
        """
        name = name.strip()
        if not name:
            raise ValidationError("Project name cannot be empty")
        if self.db.get_project_by_name(name) is not None:
            raise ConflictError(duplicate_project(name))

        with storage_errors(logger, f"add project '{name}'"):
            project_id = self.db.create_project(name)
        logger.info("Added project %s (ID %s)", name, project_id)
        return project_id

    def delete_project(self, name: str) -> None:
        """Delete a project by name.

        Day logs that mention the project keep the name.

        Raises:
            NotFoundError: If the project doesn't exist
        """
        project = self.db.get_project_by_name(name)
        if project is None:
            raise NotFoundError(project_not_found(name))
        with storage_errors(logger, f"delete project '{name}'"):
            self.db.delete_project(project.id)
        logger.info("Deleted project %s", name)

    def list_projects(self) -> list[Project]:
        """List projects sorted by name."""
        return self.db.list_projects()
