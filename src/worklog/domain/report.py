"""Report building over sets of day logs.

Everything here returns plain records; turning them into text, HTML or
spreadsheet cells is left to the callers.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from worklog.domain.classifier import classify
from worklog.domain.draft import FileGroups, group_files
from worklog.domain.entities import DayLog
from worklog.domain.hours import allocate, total_hours

NO_DESCRIPTION = "Sem descrição"
NO_PROJECT = "Sem projeto"
SUMMARY_DESCRIPTION_LIMIT = 3


@dataclass(frozen=True)
class SummaryRow:
    """One day in the general summary."""

    date: str
    projects: tuple[str, ...]
    description: str
    file_count: int


@dataclass(frozen=True)
class DetailRow:
    """One (day, file) pair with its resolved project and category."""

    date: str
    project: str
    category: str
    file: str
    description: str


@dataclass(frozen=True)
class Statistics:
    """File counts per project and per category."""

    by_project: dict[str, int]
    by_category: dict[str, int]


@dataclass(frozen=True)
class TableRow:
    """One day for the copyable table export."""

    date: str
    projects: tuple[str, ...]
    description: str
    files: tuple[str, ...]


@dataclass(frozen=True)
class TeamsBlock:
    """One day for the Teams text export; empty fields are None."""

    date: str
    projects: Optional[tuple[str, ...]]
    description: Optional[str]
    files: Optional[tuple[str, ...]]


@dataclass(frozen=True)
class ProjectSummary:
    """Hours and sample descriptions for one project."""

    project: str
    hours: int
    days: int
    descriptions: tuple[str, ...]
    truncated: bool


@dataclass(frozen=True)
class HoursTotals:
    """Total hours and hours per project."""

    total: int
    by_project: dict[str, int]


def sort_logs(logs: Iterable[DayLog]) -> list[DayLog]:
    """Order logs by date key."""
    return sorted(logs, key=lambda log: log.date)


class ReportBuilder:
    """Builds report records from day logs."""

    def summary_rows(self, logs: Iterable[DayLog]) -> list[SummaryRow]:
        """One row per day with joined projects and file count."""
        return [
            SummaryRow(
                date=log.date,
                projects=tuple(log.projects),
                description=log.description or NO_DESCRIPTION,
                file_count=len(log.file_list),
            )
            for log in sort_logs(logs)
        ]

    def detail_rows(self, logs: Iterable[DayLog]) -> list[DetailRow]:
        """One row per (day, file).

        Days saved without a file to project map are skipped entirely.
        """
        rows = []
        for log in sort_logs(logs):
            if log.file_project_map is None:
                continue
            for name in log.file_list:
                rows.append(
                    DetailRow(
                        date=log.date,
                        project=log.file_project_map.get(name) or NO_PROJECT,
                        category=classify(name, log.file_category_map),
                        file=name,
                        description=log.description or NO_DESCRIPTION,
                    )
                )
        return rows

    def statistics(self, logs: Iterable[DayLog]) -> Statistics:
        """Count files per project and per category over the detail rows."""
        by_project: dict[str, int] = {}
        by_category: dict[str, int] = {}
        for row in self.detail_rows(logs):
            by_project[row.project] = by_project.get(row.project, 0) + 1
            by_category[row.category] = by_category.get(row.category, 0) + 1
        return Statistics(by_project=by_project, by_category=by_category)

    def table_rows(self, logs: Iterable[DayLog]) -> list[TableRow]:
        return [
            TableRow(
                date=log.date,
                projects=tuple(log.projects),
                description=log.description,
                files=tuple(log.file_list),
            )
            for log in sort_logs(logs)
        ]

    def teams_blocks(self, logs: Iterable[DayLog]) -> list[TeamsBlock]:
        """One block per day with empty fields left out."""
        blocks = []
        for log in sort_logs(logs):
            files = log.file_list
            blocks.append(
                TeamsBlock(
                    date=log.date,
                    projects=tuple(log.projects) or None,
                    description=log.description or None,
                    files=tuple(files) or None,
                )
            )
        return blocks

    def project_summary(self, logs: Iterable[DayLog]) -> list[ProjectSummary]:
        """Hours and up to three descriptions per project, in first-seen order."""
        hours: dict[str, int] = {}
        days: dict[str, int] = {}
        descriptions: dict[str, list[str]] = {}

        for log in sort_logs(logs):
            for project, allocated in allocate(log.projects).items():
                hours[project] = hours.get(project, 0) + allocated
                days[project] = days.get(project, 0) + 1
                texts = descriptions.setdefault(project, [])
                if log.description:
                    texts.append(log.description)

        return [
            ProjectSummary(
                project=project,
                hours=hours[project],
                days=days[project],
                descriptions=tuple(descriptions[project][:SUMMARY_DESCRIPTION_LIMIT]),
                truncated=len(descriptions[project]) > SUMMARY_DESCRIPTION_LIMIT,
            )
            for project in hours
        ]

    def hours(self, logs: Sequence[DayLog]) -> HoursTotals:
        total, by_project = total_hours(sort_logs(logs))
        return HoursTotals(total=total, by_project=by_project)

    def group_files(self, log: DayLog) -> FileGroups:
        """Group a stored day's files as project -> category -> files."""
        return group_files(log.file_list, log.file_project_map, log.file_category_map)
