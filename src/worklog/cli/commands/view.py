"""Month viewing commands."""

import click
from worklog.cli.date_filters import month_option, resolve_cli_month
from worklog.cli.rendering import project_pills, render_hours
from worklog.cli.user_resolution import require_user
from worklog.domain.month_index import MonthIndex
from worklog.domain.report import ReportBuilder
from worklog.utils.date_parser import format_long_date, month_name

WEEKDAY_HEADERS = ("Seg", "Ter", "Qua", "Qui", "Sex", "Sáb", "Dom")


def _render_calendar(index: MonthIndex) -> None:
    days = index.days()
    click.echo(" ".join(f"{name:>5}" for name in WEEKDAY_HEADERS))
    cells = ["     "] * days[0].weekday
    for day in days:
        marker = "*" if day.log is not None else " "
        cells.append(f"{day.day:>4}{marker}")
        if len(cells) == 7:
            click.echo(" ".join(cells))
            cells = []
    if cells:
        click.echo(" ".join(cells))

    click.echo("")
    for day in days:
        if day.log is None:
            continue
        line = f"{day.day:>2}: {project_pills(day.log)}"
        if day.log.description:
            line += f" | {day.log.description[:50]}"
        click.echo(line)
        if day.log.file_list:
            click.echo(f"    Arquivos: {', '.join(day.log.file_list)}")


def _render_list(index: MonthIndex) -> None:
    weekdays = [day for day in index.days() if not day.is_weekend]
    if not weekdays:
        click.echo("Nenhum dia útil neste mês.")
        return
    for day in weekdays:
        header = format_long_date(day.date)
        if day.log is None:
            click.echo(f"{header}: -")
            continue
        click.echo(f"{header}: {project_pills(day.log)}")
        click.echo(f"  {day.log.description or 'Nenhuma descrição.'}")
        for name in day.log.file_list:
            click.echo(f"  - {name}")


@click.command("view")
@month_option
@click.option("--list", "as_list", is_flag=True, help="Show working days as a list instead of a calendar")
@click.pass_context
def view_month(ctx, month: str | None, as_list: bool):
    """View a month of entries.

    Days with an entry are marked with '*' in the calendar.
    """
    user = require_user(ctx)
    year, month_number = resolve_cli_month(ctx, month)

    with MonthIndex(ctx.obj["db"], user.user_id, year, month_number) as index:
        click.echo(f"\n{month_name(year, month_number)}")
        click.echo("-" * 41)
        if as_list:
            _render_list(index)
        else:
            _render_calendar(index)


@click.command("hours")
@month_option
@click.pass_context
def hours_summary(ctx, month: str | None):
    """Show total and per-project hours for a month."""
    user = require_user(ctx)
    year, month_number = resolve_cli_month(ctx, month)

    with MonthIndex(ctx.obj["db"], user.user_id, year, month_number) as index:
        logs = index.logs()

    if not logs:
        click.echo("No entries found.")
        return
    click.echo(f"\nResumo de Horas - {month_name(year, month_number)}")
    click.echo(render_hours(ReportBuilder().hours(logs)))


def register_commands(cli):
    """Register view commands with main CLI."""
    cli.add_command(view_month)
    cli.add_command(hours_summary)
