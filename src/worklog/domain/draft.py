"""Edit draft for a single day and its file reconciliation rules."""

from dataclasses import dataclass, field
from typing import Optional

from worklog.domain.classifier import classify
from worklog.domain.entities import DayLog, join_files
from worklog.domain.errors import (
    DuplicateFileError,
    NotFoundError,
    ValidationError,
)

FileGroups = dict[Optional[str], dict[str, list[str]]]


def synthesize_file_project_map(files: list[str], projects: list[str]) -> dict[str, str]:
    """Build a file to project map for records saved without one.

    One project takes every file. With several, the file at position i goes
    to projects[i], and files past the end go to the last project.
    """
    if not projects:
        return {}
    if len(projects) == 1:
        return {name: projects[0] for name in files}

    mapping = {}
    for index, name in enumerate(files):
        mapping[name] = projects[index] if index < len(projects) else projects[-1]
    return mapping


def group_files(
    files: list[str],
    file_project_map: Optional[dict[str, str]],
    file_category_map: Optional[dict[str, str]],
) -> FileGroups:
    """Group files as project -> category -> files, in file-list order.

    Files without a project are grouped under None.
    """
    groups: FileGroups = {}
    project_map = file_project_map or {}
    for name in files:
        project = project_map.get(name)
        category = classify(name, file_category_map)
        groups.setdefault(project, {}).setdefault(category, []).append(name)
    return groups


@dataclass
class LogDraft:
    """Detached, mutable copy of one day's entry while it is being edited.

    Incoming store updates never touch a draft; whatever the draft holds at
    save time is what gets written.
    """

    date: str
    projects: list[str] = field(default_factory=list)
    description: str = ""
    files: list[str] = field(default_factory=list)
    file_project_map: dict[str, str] = field(default_factory=dict)
    file_category_map: dict[str, str] = field(default_factory=dict)
    default_project: Optional[str] = None

    @classmethod
    def open(cls, date: str, log: Optional[DayLog] = None) -> "LogDraft":
        """Open a draft for a date, from its stored entry if there is one."""
        if log is None:
            return cls(date=date)

        projects = list(log.projects)
        files = log.file_list
        if log.file_project_map is not None:
            file_project_map = dict(log.file_project_map)
        else:
            file_project_map = synthesize_file_project_map(files, projects)

        return cls(
            date=date,
            projects=projects,
            description=log.description,
            files=files,
            file_project_map=file_project_map,
            file_category_map=dict(log.file_category_map),
            default_project=projects[-1] if projects else None,
        )

    @property
    def is_empty(self) -> bool:
        """True when description, files and projects are all empty."""
        return not self.description.strip() and not self.files and not self.projects

    def _repin_default_project(self) -> None:
        if self.default_project not in self.projects:
            self.default_project = self.projects[-1] if self.projects else None

    def toggle_project(self, name: str) -> bool:
        """Select or deselect a project.

        Deselecting leaves file assignments pointing at the project.

        Returns:
            True if the project is selected after the call
        """
        if name in self.projects:
            self.projects.remove(name)
            selected = False
        else:
            self.projects.append(name)
            selected = True
        self._repin_default_project()
        return selected

    def set_projects(self, names: list[str]) -> None:
        """Replace the selection, keeping the given order and dropping repeats."""
        self.projects = list(dict.fromkeys(n.strip() for n in names if n.strip()))
        self._repin_default_project()

    def set_default_project(self, name: str) -> None:
        """Choose which selected project new files are assigned to."""
        if name not in self.projects:
            raise ValidationError(f"Project '{name}' is not selected for {self.date}")
        self.default_project = name

    def add_file(self, name: str) -> Optional[str]:
        """Append a file and assign it to the default project.

        Falls back to the first selected project, or leaves the file
        unassigned when nothing is selected.

        Returns:
            Project the file was assigned to, or None

        Raises:
            ValidationError: If the name is blank
            DuplicateFileError: If the file is already listed
        """
        name = name.strip()
        if not name:
            raise ValidationError("File name cannot be empty")
        if name in self.files:
            raise DuplicateFileError(name)

        self.files.append(name)
        project = self.default_project or (self.projects[0] if self.projects else None)
        if project is not None:
            self.file_project_map[name] = project
        return project

    def remove_file(self, name: str) -> None:
        """Drop a file from the list; its map entries are left in place."""
        name = name.strip()
        if name not in self.files:
            raise NotFoundError(f"File '{name}' is not in the list for {self.date}")
        self.files.remove(name)

    def assign_project(self, file_name: str, project: str) -> None:
        self.file_project_map[file_name] = project

    def assign_category(self, file_name: str, category: str) -> None:
        self.file_category_map[file_name] = category

    def category_of(self, file_name: str) -> str:
        return classify(file_name, self.file_category_map)

    def group_files(self) -> FileGroups:
        return group_files(self.files, self.file_project_map, self.file_category_map)

    def to_log(self, user_id: str) -> DayLog:
        """Build the record written on save."""
        return DayLog(
            date=self.date,
            user_id=user_id,
            projects=tuple(self.projects),
            description=self.description.strip(),
            files=join_files(self.files),
            file_project_map=dict(self.file_project_map),
            file_category_map=dict(self.file_category_map),
        )
