"""Export commands."""

from pathlib import Path

import click
from worklog.cli.date_filters import month_option, resolve_cli_month
from worklog.cli.rendering import (
    render_project_summary,
    render_table_html,
    render_teams_text,
)
from worklog.cli.user_resolution import require_user
from worklog.domain.day_log import DayLogService
from worklog.domain.entities import DayLog
from worklog.domain.report import ReportBuilder
from worklog.domain.spreadsheet import build_plain_workbook, build_workbook, save_workbook
from worklog.utils.date_parser import month_name

EXPORT_KINDS = ("xlsx", "plain", "table", "teams", "summary")


def write_export(kind: str, logs: list[DayLog], label: str, output: str | None, default_name: str) -> str:
    """Produce an export and return the message to show.

    Workbooks go to a file; text exports are returned (or written to
    output when given).
    """
    report = ReportBuilder()
    if kind in ("xlsx", "plain"):
        workbook = build_workbook(logs, report) if kind == "xlsx" else build_plain_workbook(logs)
        path = save_workbook(workbook, output or default_name)
        return f"Wrote {path}"

    if kind == "table":
        content = render_table_html(report.table_rows(logs))
    elif kind == "teams":
        content = render_teams_text(report.teams_blocks(logs), label)
    else:
        content = render_project_summary(report.project_summary(logs))

    if output:
        Path(output).write_text(content, encoding="utf-8")
        return f"Wrote {output}"
    return content


@click.command("export")
@click.argument("kind", type=click.Choice(EXPORT_KINDS))
@month_option
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Output file")
@click.pass_context
def export_month(ctx, kind: str, month: str | None, output: str | None):
    """Export a month of entries.

    KIND is one of:
      xlsx     three-sheet report workbook
      plain    single-sheet workbook in the import format
      table    HTML table
      teams    Teams-formatted text
      summary  hours and descriptions per project
    """
    user = require_user(ctx)
    year, month_number = resolve_cli_month(ctx, month)
    logs = DayLogService(ctx.obj["db"], user.user_id).list_month(year, month_number)

    if not logs:
        click.echo("Nenhum registro para exportar.")
        return

    default_name = f"relatorio_{year}_{month_number}.xlsx"
    click.echo(write_export(kind, logs, month_name(year, month_number), output, default_name))


def register_commands(cli):
    """Register export command with main CLI."""
    cli.add_command(export_month)
