"""CLI helpers for date and month resolution."""

import click

from worklog.utils.date_parser import date_key, parse_date, parse_month


def resolve_cli_date(ctx: click.Context, value: str) -> str:
    """Parse a CLI date argument into a YYYY-MM-DD key, or exit."""
    try:
        return date_key(parse_date(value))
    except ValueError as e:
        click.echo(f"Error: Invalid date: {e}", err=True)
        ctx.exit(1)


def resolve_cli_month(ctx: click.Context, value: str | None) -> tuple[int, int]:
    """Parse a --month option into (year, month), defaulting to this month."""
    try:
        return parse_month(value)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)


def month_option(func):
    """Add the shared --month option to a command."""
    return click.option(
        "--month",
        "month",
        default=None,
        help="Month as YYYY-MM, or 'this month'/'last month' (default: current month)",
    )(func)
