"""Spreadsheet import command."""

import click
from worklog.cli.date_filters import month_option, resolve_cli_month
from worklog.cli.error_handling import handle_domain_error
from worklog.cli.user_resolution import require_user
from worklog.domain.errors import DomainError
from worklog.domain.spreadsheet import ImportService


@click.command("import")
@click.argument("spreadsheet", type=click.Path(exists=True, dir_okay=False))
@month_option
@click.pass_context
def import_spreadsheet(ctx, spreadsheet: str, month: str | None):
    """Import entries from an .xlsx file.

    Only rows dated inside the selected month are imported; the first sheet
    must have the columns Data, Projetos, Descrição and Arquivos.
    """
    user = require_user(ctx)
    year, month_number = resolve_cli_month(ctx, month)
    service = ImportService(ctx.obj["db"], user.user_id)

    try:
        result = service.import_workbook(spreadsheet, year, month_number)
    except (DomainError, FileNotFoundError) as e:
        handle_domain_error(ctx, e)

    if result.imported == 0:
        click.echo("Nenhum registro válido para o mês atual encontrado no arquivo.")
        return
    click.echo(f"\nImport complete:")
    click.echo(f"  Imported: {result.imported} entries")
    click.echo(f"  Skipped: {result.skipped} rows")


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_spreadsheet)
