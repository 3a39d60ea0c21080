"""Day entry commands."""

import click
from worklog.cli.date_filters import resolve_cli_date
from worklog.cli.error_handling import handle_domain_error
from worklog.cli.rendering import project_pills, render_file_groups
from worklog.cli.user_resolution import require_user
from worklog.domain.classifier import CATEGORIES, category_name
from worklog.domain.day_log import DayLogService
from worklog.domain.draft import LogDraft
from worklog.domain.entities import SaveOutcome
from worklog.domain.errors import DomainError, DuplicateFileError


def _service(ctx) -> DayLogService:
    user = require_user(ctx)
    return DayLogService(ctx.obj["db"], user.user_id)


def _open(ctx, service: DayLogService, date: str) -> LogDraft:
    try:
        return service.open_draft(resolve_cli_date(ctx, date))
    except DomainError as e:
        handle_domain_error(ctx, e)


def _save(ctx, service: DayLogService, draft: LogDraft) -> None:
    try:
        outcome = service.save(draft)
    except DomainError as e:
        handle_domain_error(ctx, e)
    if outcome == SaveOutcome.DELETED:
        click.echo(f"Entry for {draft.date} is empty and was deleted.")
    else:
        click.echo(f"Saved entry for {draft.date}")


@click.group("log")
def log_group():
    """Record and edit day entries."""
    pass


@log_group.command("show")
@click.argument("date")
@click.pass_context
def show_log(ctx, date: str):
    """Show the entry for DATE (YYYY-MM-DD, 'today', 'yesterday')."""
    service = _service(ctx)
    draft = _open(ctx, service, date)

    if draft.is_empty:
        click.echo(f"No entry for {draft.date}.")
        return

    log = draft.to_log(service.user_id)
    click.echo(f"\n{draft.date}")
    click.echo("-" * 60)
    if draft.projects:
        click.echo(f"Projects: {project_pills(log)}")
        click.echo(f"Default project for new files: {draft.default_project}")
    click.echo(f"Description: {draft.description or 'Nenhuma descrição.'}")
    if draft.files:
        click.echo("Files:")
        for line in render_file_groups(draft.group_files()):
            click.echo(line)


@log_group.command("set")
@click.argument("date")
@click.option("--project", "-p", "projects", multiple=True, help="Project, in selection order (repeatable)")
@click.option("--description", "-d", help="Description of the work")
@click.option("--file", "-f", "files", multiple=True, help="Edited file to add (repeatable)")
@click.option("--default-project", help="Selected project that new files go to")
@click.option("--clear-projects", is_flag=True, help="Deselect all projects")
@click.pass_context
def set_log(
    ctx,
    date: str,
    projects: tuple[str, ...],
    description: str | None,
    files: tuple[str, ...],
    default_project: str | None,
    clear_projects: bool,
):
    """Create or update the entry for DATE.

    Only the given fields change. Saving an entry with no projects,
    description or files deletes it.

    Examples:
        worklog log set today -p CMPC -p Tekno -d "Ajustes no relatório" -f rel.sql
        worklog log set 2026-10-19 --description ""
    """
    service = _service(ctx)
    draft = _open(ctx, service, date)

    if clear_projects:
        draft.set_projects([])
    if projects:
        draft.set_projects(list(projects))
    if description is not None:
        draft.description = description.strip()

    try:
        if default_project is not None:
            draft.set_default_project(default_project)
        for name in files:
            try:
                draft.add_file(name)
            except DuplicateFileError as e:
                click.echo(f"Warning: {e}", err=True)
    except DomainError as e:
        handle_domain_error(ctx, e)

    _save(ctx, service, draft)


@log_group.command("toggle-project")
@click.argument("date")
@click.argument("project")
@click.pass_context
def toggle_project(ctx, date: str, project: str):
    """Select or deselect PROJECT on DATE.

    Files already assigned to a deselected project keep that assignment.
    """
    service = _service(ctx)
    draft = _open(ctx, service, date)
    selected = draft.toggle_project(project)
    click.echo(f"{'Selected' if selected else 'Deselected'} '{project}'")
    _save(ctx, service, draft)


def _require_selected(ctx, draft: LogDraft, project: str) -> None:
    if project not in draft.projects:
        click.echo(f"Error: Project '{project}' is not selected for {draft.date}", err=True)
        ctx.exit(1)


@log_group.command("add-file")
@click.argument("date")
@click.argument("file_name", metavar="FILE")
@click.option("--project", help="Selected project to assign the file to (default: the day's default project)")
@click.pass_context
def add_file(ctx, date: str, file_name: str, project: str | None):
    """Add an edited FILE to DATE."""
    service = _service(ctx)
    draft = _open(ctx, service, date)
    file_name = file_name.strip()
    if project is not None:
        _require_selected(ctx, draft, project)

    try:
        assigned = draft.add_file(file_name)
    except DomainError as e:
        handle_domain_error(ctx, e)
    if project is not None:
        draft.assign_project(file_name, project)
        assigned = project

    click.echo(f"Added '{file_name}' -> {assigned or 'no project'}")
    _save(ctx, service, draft)


@log_group.command("remove-file")
@click.argument("date")
@click.argument("file_name", metavar="FILE")
@click.pass_context
def remove_file(ctx, date: str, file_name: str):
    """Remove FILE from DATE."""
    service = _service(ctx)
    draft = _open(ctx, service, date)
    try:
        draft.remove_file(file_name)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Removed '{file_name.strip()}'")
    _save(ctx, service, draft)


@log_group.command("assign")
@click.argument("date")
@click.argument("file_name", metavar="FILE")
@click.option("--project", help="Selected project the file belongs to")
@click.option("--category", type=click.Choice(CATEGORIES), help="Category override")
@click.pass_context
def assign_file(ctx, date: str, file_name: str, project: str | None, category: str | None):
    """Set the project and/or category of FILE on DATE."""
    if project is None and category is None:
        click.echo("Error: Provide --project and/or --category.", err=True)
        ctx.exit(1)

    service = _service(ctx)
    draft = _open(ctx, service, date)
    file_name = file_name.strip()
    if file_name not in draft.files:
        click.echo(f"Error: File '{file_name}' is not in the list for {draft.date}", err=True)
        ctx.exit(1)

    if project is not None:
        _require_selected(ctx, draft, project)
        draft.assign_project(file_name, project)
    if category is not None:
        draft.assign_category(file_name, category)

    current = draft.file_project_map.get(file_name) or "no project"
    click.echo(f"'{file_name}' -> {current}, {category_name(draft.category_of(file_name))}")
    _save(ctx, service, draft)


@log_group.command("files")
@click.argument("date")
@click.pass_context
def list_files(ctx, date: str):
    """Show DATE's files grouped by project and category."""
    service = _service(ctx)
    draft = _open(ctx, service, date)
    if not draft.files:
        click.echo(f"No files for {draft.date}.")
        return
    for line in render_file_groups(draft.group_files()):
        click.echo(line)


@log_group.command("delete")
@click.argument("date")
@click.pass_context
def delete_log(ctx, date: str):
    """Delete the entry for DATE."""
    service = _service(ctx)
    key = resolve_cli_date(ctx, date)
    try:
        service.delete(key)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted entry for {key}")


@log_group.command("duplicate")
@click.argument("source")
@click.argument("target")
@click.pass_context
def duplicate_log(ctx, source: str, target: str):
    """Copy the entry for SOURCE to TARGET, replacing TARGET's entry."""
    service = _service(ctx)
    if not target.strip():
        click.echo("Error: Target date is required", err=True)
        ctx.exit(1)
    source_key = resolve_cli_date(ctx, source)
    target_key = resolve_cli_date(ctx, target)
    try:
        service.duplicate(source_key, target_key)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Copied {source_key} to {target_key}")


def register_commands(cli):
    """Register day entry commands with main CLI."""
    cli.add_command(log_group)
