"""Daily hours allocation across a day's projects."""

from typing import Iterable, Sequence

from worklog.domain.entities import DayLog

DAILY_HOURS = 6


def allocate(project_names: Sequence[str]) -> dict[str, int]:
    """Split the daily budget evenly across projects.

    The first ``DAILY_HOURS % n`` projects, in the given (selection) order,
    receive one extra hour.

    Args:
        project_names: Project names in selection order

    Returns:
        Mapping of project name to whole hours, summing to DAILY_HOURS
    """
    hours: dict[str, int] = {}
    if not project_names:
        return hours

    base, remainder = divmod(DAILY_HOURS, len(project_names))
    for index, name in enumerate(project_names):
        hours[name] = base + 1 if index < remainder else base
    return hours


def total_hours(logs: Iterable[DayLog]) -> tuple[int, dict[str, int]]:
    """Sum allocated hours over logs.

    Returns:
        Tuple of (total hours, hours per project in first-seen order)
    """
    per_project: dict[str, int] = {}
    total = 0
    for log in logs:
        for project, hours in allocate(log.projects).items():
            per_project[project] = per_project.get(project, 0) + hours
            total += hours
    return total, per_project
