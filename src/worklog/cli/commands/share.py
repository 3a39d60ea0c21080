"""Share link commands."""

from datetime import datetime, UTC

import click
from worklog.cli.commands.export import EXPORT_KINDS, write_export
from worklog.cli.date_filters import month_option, resolve_cli_month
from worklog.cli.error_handling import handle_domain_error
from worklog.cli.rendering import project_pills
from worklog.cli.user_resolution import require_user
from worklog.domain.errors import DomainError
from worklog.domain.report import ReportBuilder
from worklog.domain.share import ShareService
from worklog.utils.date_parser import format_long_date


@click.group("share")
def share_group():
    """Publish read-only month snapshots."""
    pass


@share_group.command("create")
@month_option
@click.option("--days", type=int, help="Days until the link expires (default: WORKLOG_SHARE_DAYS or 30)")
@click.pass_context
def create_share(ctx, month: str | None, days: int | None):
    """Create or refresh the share link for a month."""
    user = require_user(ctx)
    year, month_number = resolve_cli_month(ctx, month)
    service = ShareService(ctx.obj["db"], user)

    try:
        share = service.create(year, month_number, expires_in_days=days)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Share ID: {share.share_id}")
    click.echo(f"Month: {share.month_name} ({len(share.logs)} entries)")
    click.echo(f"Expires: {share.expires_at:%Y-%m-%d %H:%M} UTC")


@share_group.command("revoke")
@click.argument("share_id")
@click.pass_context
def revoke_share(ctx, share_id: str):
    """Disable a share link."""
    user = require_user(ctx)
    service = ShareService(ctx.obj["db"], user)
    try:
        service.revoke(share_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Share {share_id} disabled.")


@share_group.command("list")
@click.pass_context
def list_shares(ctx):
    """List your share links."""
    user = require_user(ctx)
    shares = ShareService(ctx.obj["db"], user).list_shares()
    if not shares:
        click.echo("No share links.")
        return

    now = datetime.now(UTC)
    click.echo(f"{'ID':<24} {'Month':<22} {'Expires':<17} Status")
    click.echo("-" * 75)
    for share in shares:
        if share.is_expired(now):
            status = "expired"
        elif not share.is_active:
            status = "disabled"
        else:
            status = "active"
        click.echo(f"{share.share_id:<24} {share.month_name:<22} {share.expires_at:%Y-%m-%d %H:%M} {status}")


@share_group.command("open")
@click.argument("share_id")
@click.option("--export", "export_kind", type=click.Choice(EXPORT_KINDS), help="Export the shared month instead of listing it")
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Output file for --export")
@click.pass_context
def open_share(ctx, share_id: str, export_kind: str | None, output: str | None):
    """Show a shared month. No sign-in needed."""
    service = ShareService(ctx.obj["db"])
    try:
        share = service.fetch(share_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    logs = list(share.logs)
    if export_kind is not None:
        if not logs:
            click.echo("Nenhum registro para exportar.")
            return
        default_name = f"relatorio_compartilhado_{share.month_name.replace(' ', '_')}.xlsx"
        click.echo(write_export(export_kind, logs, share.month_name, output, default_name))
        return

    click.echo(f"\n{share.user_name} - {share.month_name}")
    click.echo("-" * 60)
    if not logs:
        click.echo("Nenhum registro encontrado.")
        return

    report = ReportBuilder()
    for log in logs:
        click.echo(f"{format_long_date(log.date)}: {project_pills(log)}")
        click.echo(f"  {log.description or 'Nenhuma descrição.'}")
        for name in log.file_list:
            click.echo(f"  - {name}")
    hours = report.hours(logs)
    click.echo(f"\nTotal: {hours.total}h")


def register_commands(cli):
    """Register share commands with main CLI."""
    cli.add_command(share_group)
