"""Text and markup rendering of report records for the CLI."""

from html import escape
from typing import Optional, Sequence

from worklog.domain.classifier import category_name
from worklog.domain.draft import FileGroups
from worklog.domain.entities import DayLog
from worklog.domain.hours import allocate
from worklog.domain.report import (
    HoursTotals,
    ProjectSummary,
    TableRow,
    TeamsBlock,
)
from worklog.utils.date_parser import format_long_date, format_short_date

SEPARATOR = "---"


def project_pills(log: Optional[DayLog]) -> str:
    """Projects with their allocated hours, e.g. '3h CMPC, 3h Tekno'."""
    if log is None:
        return ""
    hours = allocate(log.projects)
    return ", ".join(f"{hours.get(project, 0)}h {project}" for project in log.projects)


def render_table_html(rows: Sequence[TableRow]) -> str:
    """Render day rows as an HTML table for pasting into documents."""
    parts = [
        "<table><thead><tr><th>Data</th><th>Projetos</th>"
        "<th>Descrição</th><th>Arquivos</th></tr></thead><tbody>"
    ]
    for row in rows:
        parts.append(
            "<tr>"
            f"<td>{escape(format_short_date(row.date))}</td>"
            f"<td>{escape(', '.join(row.projects))}</td>"
            f"<td>{escape(row.description)}</td>"
            f"<td>{escape(', '.join(row.files))}</td>"
            "</tr>"
        )
    parts.append("</tbody></table>")
    return "".join(parts)


def render_teams_text(blocks: Sequence[TeamsBlock], month_label: str) -> str:
    """Render day blocks as Markdown-like text for Teams."""
    lines = [f"**Relatório de Atividades - {month_label}**", "", SEPARATOR, ""]
    for block in blocks:
        lines.append(f"**{format_long_date(block.date)}**")
        if block.projects:
            lines.append(f"* **Projetos:** {', '.join(block.projects)}")
        if block.description:
            lines.append(f"* **Descrição:** {block.description}")
        if block.files:
            lines.append(f"* **Arquivos:** {', '.join(block.files)}")
        lines.extend(["", SEPARATOR, ""])
    return "\n".join(lines)


def render_project_summary(summaries: Sequence[ProjectSummary]) -> str:
    """Render per-project hours with sample descriptions."""
    lines = []
    for summary in summaries:
        lines.append(f"{summary.project}: {summary.hours}h em {summary.days} dia(s)")
        text = "; ".join(summary.descriptions)
        if summary.truncated:
            text = f"{text}; ..."
        if text:
            lines.append(f"  {text}")
    return "\n".join(lines)


def render_hours(totals: HoursTotals) -> str:
    lines = [f"Total: {totals.total}h"]
    for project, hours in totals.by_project.items():
        lines.append(f"  {project}: {hours}h")
    return "\n".join(lines)


def render_file_groups(groups: FileGroups) -> list[str]:
    """Indented lines for a project -> category -> files grouping."""
    lines = []
    for project, categories in groups.items():
        lines.append(f"  {project or 'Sem projeto'}")
        for category, files in categories.items():
            lines.append(f"    {category_name(category)}")
            for name in files:
                lines.append(f"      - {name}")
    return lines
